# database/vehicles.py

"""School vehicles and live driver locations"""

import logging
from datetime import datetime, timezone

from .connection import get_client, response_data, BACKEND_ERRORS, error_message

logger = logging.getLogger(__name__)


def fetch_vehicles(school_id):
    """
    Get a school's vehicles with the assigned driver's name

    Returns:
        list: Vehicle rows, each with an added driver_name
    """
    try:
        response = (
            get_client().table("vehicles")
            .select("*, users!driver_id(name)")
            .eq("school_id", school_id)
            .execute()
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching vehicles for school {school_id}: {error_message(e)}")
        return []

    vehicles = []
    for row in response_data(response, []):
        vehicle = {k: v for k, v in row.items() if k != "users"}
        vehicle["driver_name"] = (row.get("users") or {}).get("name")
        vehicles.append(vehicle)
    return vehicles


def upsert_vehicle(vehicle):
    """
    Register or update a vehicle

    Args:
        vehicle: Dictionary with school_id, vehicle_number, vehicle_type,
            driver_id and optional is_active (defaults to True)

    Returns:
        bool: True if saved successfully, False otherwise
    """
    is_active = vehicle.get("is_active")
    try:
        get_client().table("vehicles").upsert({
            "school_id": vehicle.get("school_id"),
            "vehicle_number": vehicle.get("vehicle_number"),
            "vehicle_type": vehicle.get("vehicle_type"),
            "driver_id": vehicle.get("driver_id"),
            "is_active": True if is_active is None else bool(is_active),
        }).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Failed to save vehicle {vehicle.get('vehicle_number')}: {error_message(e)}")
        return False

    logger.info(f"Vehicle {vehicle.get('vehicle_number')} saved")
    return True


def update_vehicle_location(driver_id, lat, lng):
    """
    Record the current position of a driver's vehicle

    Args:
        driver_id: Driver's user id
        lat: Latitude
        lng: Longitude

    Returns:
        bool: True if saved successfully, False otherwise
    """
    try:
        get_client().table("vehicles").update({
            "last_lat": lat,
            "last_lng": lng,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }).eq("driver_id", driver_id).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Failed to update location for driver {driver_id}: {error_message(e)}")
        return False
    return True
