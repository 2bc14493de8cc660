"""
Dashboard: Streamlit UI, console launcher and the top-level fault boundary.
"""
