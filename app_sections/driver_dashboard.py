# app_sections/driver_dashboard.py

import logging
import streamlit as st
import pandas as pd
from database import fetch_vehicles, update_vehicle_location

logger = logging.getLogger(__name__)


def my_vehicle(dashboard):
    """Assigned vehicle and manual location update"""
    st.subheader("🚌 My Vehicle")

    vehicles = [v for v in fetch_vehicles(dashboard["school_db_id"]) if v.get("driver_id") == dashboard["user_id"]]
    if not vehicles:
        st.info("No vehicle assigned to you yet.")
        return

    vehicle = vehicles[0]
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Vehicle", vehicle.get("vehicle_number") or "-")
    with col2:
        st.metric("Type", vehicle.get("vehicle_type") or "-")

    if vehicle.get("last_lat") is not None and vehicle.get("last_lng") is not None:
        st.caption(f"Last update: {vehicle.get('updated_at') or 'unknown'}")
        st.map(pd.DataFrame([{"lat": vehicle["last_lat"], "lon": vehicle["last_lng"]}]), zoom=13)

    with st.form("vehicle_location_form"):
        col1, col2 = st.columns(2)
        with col1:
            lat = st.number_input("Latitude", min_value=-90.0, max_value=90.0,
                                  value=float(vehicle.get("last_lat") or 0.0), format="%.6f")
        with col2:
            lng = st.number_input("Longitude", min_value=-180.0, max_value=180.0,
                                  value=float(vehicle.get("last_lng") or 0.0), format="%.6f")
        share = st.form_submit_button("📍 Share Location", type="primary", use_container_width=True)

    if share:
        if update_vehicle_location(dashboard["user_id"], lat, lng):
            st.success("✅ Location updated")
            st.rerun()
        else:
            st.error("❌ Could not update location")
