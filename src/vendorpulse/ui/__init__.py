"""Streamlit UI for VendorPulse."""
