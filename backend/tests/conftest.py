import pytest

# Classic polyline example: (38.5, -120.2), (40.7, -120.95), (43.252, -126.453)
ENCODED_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"

@pytest.fixture
def current_step_json():
    return {
        "name": "Main Street (NH 101)",
        "ref": "NH 101",
        "destinations": "I 95 South: Boston, Providence",
        "mode": "driving",
        "distance": 1204.5,
        "duration": 97.3,
        "geometry": ENCODED_POLYLINE,
        "intersections": [
            {
                "location": [-71.06, 42.36],
                "bearings": [0, 90, 180],
                "entry": [True, False, True],
                "in": 2,
                "out": 0,
            },
        ],
        "maneuver": {
            "bearing_before": 175,
            "bearing_after": 88,
            "type": "turn",
            "modifier": "left",
            "location": [-71.06, 42.36],
            "instruction": "Turn left onto Main Street",
        },
    }

@pytest.fixture
def rotary_step_json():
    return {
        "name": "5th Ave",
        "rotary_name": "Columbus Circle",
        "mode": "driving",
        "distance": 300,
        "duration": 40,
        "geometry": {"type": "LineString", "coordinates": [[-73.982, 40.768], [-73.981, 40.767]]},
        "maneuver": {
            "type": "rotary",
            "modifier": "slight right",
            "exit": 2,
            "location": [-73.982, 40.768],
        },
    }

@pytest.fixture
def legacy_step_json():
    return {
        "way_name": "Main Street (NH 101)",
        "mode": "driving",
        "distance": 512,
        "duration": 41,
        "maneuver": {
            "type": "bear right",
            "heading": 45,
            "location": {"type": "Point", "coordinates": [-71.1, 42.3]},
            "instruction": "Bear right onto Main Street",
        },
    }
