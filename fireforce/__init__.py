"""
Core package for the FireForce records dashboard.

Submodules provide record fetching, schema inference, search, summary
statistics and the Streamlit rendering helpers orchestrated by the top-level
`app.py`.
"""
