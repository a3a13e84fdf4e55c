"""
Typed get/add/update/delete bindings of the repository to each entity key.
"""

from __future__ import annotations

from typing import List, Optional

from fleet_maintenance.config import COMPONENTS_KEY, JOBS_KEY, NOTIFICATIONS_KEY, SHIPS_KEY
from fleet_maintenance.data.models import Component, Job, Notification, Ship
from fleet_maintenance.data.repository import Repository
from fleet_maintenance.data.seed import default_collections


class FleetAccessors:
    def __init__(self, repository: Repository) -> None:
        self.repository = repository

    def initialize_storage(self) -> List[str]:
        return self.repository.seed_defaults(default_collections())

    # Ships

    def get_ships(self) -> List[Ship]:
        return [Ship.from_record(r) for r in self.repository.get_all(SHIPS_KEY)]

    def get_ship(self, ship_id: str) -> Optional[Ship]:
        return next((s for s in self.get_ships() if s.id == ship_id), None)

    def add_ship(self, ship: Ship) -> Ship:
        self.repository.add(SHIPS_KEY, ship.to_record())
        return ship

    def update_ship(self, ship: Ship) -> Optional[Ship]:
        if self.repository.update(SHIPS_KEY, ship.to_record()) is None:
            return None
        return ship

    def delete_ship(self, ship_id: str) -> None:
        self.repository.delete(SHIPS_KEY, ship_id)

    # Components

    def get_components(self) -> List[Component]:
        return [Component.from_record(r) for r in self.repository.get_all(COMPONENTS_KEY)]

    def add_component(self, component: Component) -> Component:
        self.repository.add(COMPONENTS_KEY, component.to_record())
        return component

    def update_component(self, component: Component) -> Optional[Component]:
        if self.repository.update(COMPONENTS_KEY, component.to_record()) is None:
            return None
        return component

    def delete_component(self, component_id: str) -> None:
        self.repository.delete(COMPONENTS_KEY, component_id)

    # Jobs

    def get_jobs(self) -> List[Job]:
        return [Job.from_record(r) for r in self.repository.get_all(JOBS_KEY)]

    def add_job(self, job: Job) -> Job:
        self.repository.add(JOBS_KEY, job.to_record())
        return job

    def update_job(self, job: Job) -> Optional[Job]:
        if self.repository.update(JOBS_KEY, job.to_record()) is None:
            return None
        return job

    def delete_job(self, job_id: str) -> None:
        self.repository.delete(JOBS_KEY, job_id)

    # Notifications

    def get_notifications(self) -> List[Notification]:
        return [Notification.from_record(r) for r in self.repository.get_all(NOTIFICATIONS_KEY)]

    def add_notification(self, notification: Notification) -> Notification:
        self.repository.add(NOTIFICATIONS_KEY, notification.to_record())
        return notification

    def delete_notification(self, notification_id: str) -> None:
        self.repository.delete(NOTIFICATIONS_KEY, notification_id)
