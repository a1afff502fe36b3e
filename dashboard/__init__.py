"""
Dashboard demo package.

This module exposes a small Streamlit dashboard with a clear separation
between data and computation (core), presentation (ui), and Streamlit
utilities (utils).
"""
