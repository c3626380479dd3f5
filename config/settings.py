"""Application settings and configuration."""

import os
from typing import Dict, Any, List

# Major water-stressed cities (population in millions)
MONITORED_LOCATIONS: List[Dict[str, Any]] = [
    {"name": "Chennai", "latitude": 13.0827, "longitude": 80.2707, "country": "IN", "population_millions": 11.0},
    {"name": "Cape Town", "latitude": -33.9249, "longitude": 18.4241, "country": "ZA", "population_millions": 4.6},
    {"name": "São Paulo", "latitude": -23.5505, "longitude": -46.6333, "country": "BR", "population_millions": 22.4},
    {"name": "Mexico City", "latitude": 19.4326, "longitude": -99.1332, "country": "MX", "population_millions": 22.0},
    {"name": "Jakarta", "latitude": -6.2088, "longitude": 106.8456, "country": "ID", "population_millions": 10.6},
    {"name": "Delhi", "latitude": 28.6139, "longitude": 77.2090, "country": "IN", "population_millions": 32.0},
    {"name": "Beijing", "latitude": 39.9042, "longitude": 116.4074, "country": "CN", "population_millions": 21.5},
    {"name": "Istanbul", "latitude": 41.0082, "longitude": 28.9784, "country": "TR", "population_millions": 15.5},
    {"name": "Tokyo", "latitude": 35.6762, "longitude": 139.6503, "country": "JP", "population_millions": 37.4},
    {"name": "Cairo", "latitude": 30.0444, "longitude": 31.2357, "country": "EG", "population_millions": 20.5},
    {"name": "Lagos", "latitude": 6.5244, "longitude": 3.3792, "country": "NG", "population_millions": 15.0},
    {"name": "Karachi", "latitude": 24.8607, "longitude": 67.0011, "country": "PK", "population_millions": 16.0},
    {"name": "Dhaka", "latitude": 23.8103, "longitude": 90.4125, "country": "BD", "population_millions": 22.5},
    {"name": "Manila", "latitude": 14.5995, "longitude": 120.9842, "country": "PH", "population_millions": 13.9},
    {"name": "Los Angeles", "latitude": 34.0522, "longitude": -118.2437, "country": "US", "population_millions": 13.0},
    {"name": "Phoenix", "latitude": 33.4484, "longitude": -112.0740, "country": "US", "population_millions": 5.0},
    {"name": "Singapore", "latitude": 1.3521, "longitude": 103.8198, "country": "SG", "population_millions": 5.7},
    {"name": "Dubai", "latitude": 25.2048, "longitude": 55.2708, "country": "AE", "population_millions": 3.3},
    {"name": "Lima", "latitude": -12.0464, "longitude": -77.0428, "country": "PE", "population_millions": 10.7},
    {"name": "Bangalore", "latitude": 12.9716, "longitude": 77.5946, "country": "IN", "population_millions": 12.3},
]

# Reference points used by the satellite data panel (no population figures)
REFERENCE_LOCATIONS: List[Dict[str, Any]] = [
    {"name": "Lake Chad Basin", "latitude": 13.5, "longitude": 14.5},
    {"name": "Delhi, India", "latitude": 28.6139, "longitude": 77.2090},
    {"name": "Central Valley, CA", "latitude": 36.7468, "longitude": -119.7713},
    {"name": "Albuquerque, NM", "latitude": 35.0844, "longitude": -106.6504},
    {"name": "Niger", "latitude": 17.607789, "longitude": 8.081666},
]

# USGS river monitoring stations
USGS_STATIONS = {
    "colorado_river": "09380000",  # Colorado River at Lees Ferry, AZ
    "mississippi": "07374000",  # Mississippi River at Baton Rouge, LA
    "rio_grande": "08330000",  # Rio Grande at Albuquerque, NM
    "sacramento": "11447650",  # Sacramento River at Freeport, CA
}

# Data provider settings
NASA_POWER_SETTINGS = {
    "url": "https://power.larc.nasa.gov/api/temporal/daily/point",
    "parameters": ["PRECTOTCORR", "T2M", "RH2M"],
    "community": "RE",
    "lookback_days": 30,
    "timeout": float(os.getenv("NASA_POWER_TIMEOUT", "30")),
}

# Soil moisture and evapotranspiration at the reference points
NASA_POWER_SATELLITE_SETTINGS = {
    "url": "https://power.larc.nasa.gov/api/temporal/daily/point",
    "community": "AG",
    "lookback_days": 30,
    "timeout": float(os.getenv("NASA_POWER_TIMEOUT", "30")),
}

OPEN_METEO_SETTINGS = {
    "url": "https://api.open-meteo.com/v1/forecast",
    "past_days": 30,
    "timeout": float(os.getenv("OPEN_METEO_TIMEOUT", "15")),
}

USGS_SETTINGS = {
    "url": "https://waterservices.usgs.gov/nwis/iv/",
    "parameter_codes": ["00065", "00060"],  # gauge height (ft), discharge (cfs)
    "timeout": float(os.getenv("USGS_TIMEOUT", "15")),
}

# Monitoring loop settings
MONITOR_SETTINGS = {
    "request_delay": float(os.getenv("WATER_STRESS_REQUEST_DELAY", "1.0")),  # seconds
    "update_interval": float(os.getenv("WATER_STRESS_UPDATE_INTERVAL", "300")),  # seconds
    "ticker_interval": 5,  # seconds
    "top_n": 8,
    "missing_data_policy": os.getenv("WATER_STRESS_MISSING_DATA", "zero"),
    "refresh_on_startup": os.getenv("WATER_STRESS_REFRESH_ON_STARTUP", "false").lower() == "true",
    # CSV/XLSX written after each API refresh; unset disables the export
    "export_file": os.getenv("WATER_STRESS_EXPORT_FILE") or None,
}

# API settings
API_SETTINGS = {
    "title": "Water Stress Monitor API",
    "description": "Live water stress index for water-stressed cities worldwide",
    "version": "1.0.0",
}

# Logging settings
LOG_SETTINGS = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
