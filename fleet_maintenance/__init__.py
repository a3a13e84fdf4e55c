"""
Core package for the fleet maintenance dashboard.

Submodules provide the key-value store, entity repository, relationship and
aggregation helpers, and the Streamlit user interface orchestrated by the
top-level `app.py`.
"""
