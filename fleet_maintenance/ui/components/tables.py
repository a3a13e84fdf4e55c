"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from fleet_maintenance.ui.components.formatting import format_date, status_badge


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    labels: Optional[Dict[str, str]] = None,
    height: Optional[int] = None,
    export_file_name: Optional[str] = None,
    empty_message: str = "No records to display.",
) -> None:
    if df.empty:
        st.info(empty_message)
        return

    formatted_df = df.copy()
    if column_config:
        for column, config in column_config.items():
            if column not in formatted_df.columns:
                continue
            fmt_type = config.get("type")
            if fmt_type == "date":
                formatted_df[column] = formatted_df[column].apply(format_date)
            elif fmt_type == "badge":
                formatted_df[column] = formatted_df[column].apply(status_badge)

    if labels:
        formatted_df = formatted_df.rename(columns=labels)

    kwargs = {"use_container_width": True, "hide_index": True}
    if height:
        kwargs["height"] = height
    st.dataframe(formatted_df, **kwargs)

    if export_file_name:
        csv_bytes = df.to_csv(index=False).encode("utf-8")
        st.download_button(
            "Download CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
        )
