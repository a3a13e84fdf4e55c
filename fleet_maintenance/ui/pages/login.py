from __future__ import annotations

import streamlit as st

from fleet_maintenance.auth import login
from fleet_maintenance.data.store import KeyValueStore


def render(store: KeyValueStore) -> None:
    _, center, _ = st.columns([1, 2, 1])
    with center:
        st.title("⚓ Ship Maintenance Dashboard")
        st.caption("Demo accounts: admin@entnt.in / admin123, inspector@entnt.in / inspect123, engineer@entnt.in / engine123")
        with st.form("fleet_login"):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign In", use_container_width=True)

        if submitted:
            if login(store, email.strip(), password) is None:
                st.error("Invalid email or password")
            else:
                st.rerun()
