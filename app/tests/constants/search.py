from enum import Enum


class SearchTestConstants(Enum):
    MOCK_ZIP_CODE = "94103"
    MOCK_OTHER_ZIP_CODE = "10001"
    MOCK_CENTER = {"latitude": 37.7726402, "longitude": -122.4099154}
    MOCK_OTHER_CENTER = {"latitude": 40.7484284, "longitude": -73.9967103}


MOCK_OVERPASS_RESPONSE = {
    "version": 0.6,
    "generator": "Overpass API 0.7.62.1",
    "elements": [
        {
            "type": "node",
            "id": 1001,
            "lat": 37.7765,
            "lon": -122.4172,
            "tags": {
                "amenity": "cafe",
                "name": "Blue Bottle Coffee",
                "addr:street": "Market Street",
                "addr:city": "San Francisco",
                "addr:state": "CA",
                "addr:postcode": "94103",
            },
        },
        {
            "type": "way",
            "id": 2002,
            "center": {"lat": 37.7699, "lon": -122.4113},
            "tags": {
                "amenity": "cafe",
                "name": "Sightglass Coffee",
                "addr:street": "7th Street",
                "addr:city": "San Francisco",
            },
        },
        {
            "type": "node",
            "id": 1003,
            "lat": 37.7801,
            "lon": -122.4056,
            "tags": {"amenity": "cafe", "name": "Philz Coffee"},
        },
        {
            "type": "node",
            "id": 1004,
            "lat": 37.7652,
            "lon": -122.4210,
            "tags": {"amenity": "cafe"},
        },
        {
            "type": "relation",
            "id": 3005,
            "tags": {"name": "Coffee Cultures Collective", "addr:postcode": "94103"},
        },
    ],
}
