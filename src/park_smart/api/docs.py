"""Hand-authored OpenAPI description published at /api-docs."""

from fastapi import FastAPI

from ..config import AppConfig

DOCS_PATH = "/api-docs"
OPENAPI_PATH = f"{DOCS_PATH}/openapi.json"

PARKING_SPOT_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "integer", "example": 1},
        "locationName": {"type": "string", "example": "Quantum Cortex HQ - Basement 1"},
        "spotNumber": {"type": "string", "example": "A01"},
        "isOccupied": {"type": "boolean", "example": False},
        "reservedBy": {"type": "string", "nullable": True, "example": None},
    },
}

MESSAGE_SCHEMA = {
    "type": "object",
    "properties": {
        "message": {"type": "string", "example": "Parking spot not found."},
    },
}

SPOT_ACTION_SCHEMA = {
    "type": "object",
    "properties": {
        "message": {"type": "string", "example": "Spot A01 booked successfully by Alister."},
        "spot": {"$ref": "#/components/schemas/ParkingSpot"},
    },
}


def _id_parameter(action: str) -> dict:
    return {
        "in": "path",
        "name": "id",
        "required": True,
        "description": f"The numeric ID of the parking spot to {action}.",
        "schema": {"type": "integer"},
    }


def _json(ref: str) -> dict:
    return {"application/json": {"schema": {"$ref": f"#/components/schemas/{ref}"}}}


NOT_FOUND = {"description": "Parking spot not found.", "content": _json("Message")}

PATHS = {
    "/spots": {
        "get": {
            "summary": "Retrieve a list of all parking spots",
            "description": "Fetches a list of all available parking spots and their current status.",
            "responses": {
                "200": {
                    "description": "A list of parking spots.",
                    "content": {
                        "application/json": {
                            "schema": {
                                "type": "array",
                                "items": {"$ref": "#/components/schemas/ParkingSpot"},
                            },
                        },
                    },
                },
            },
        },
    },
    "/spots/{id}": {
        "get": {
            "summary": "Get a single parking spot by ID",
            "description": "Fetches the details of a single parking spot using its unique ID.",
            "parameters": [_id_parameter("retrieve")],
            "responses": {
                "200": {"description": "Details of the parking spot.", "content": _json("ParkingSpot")},
                "404": NOT_FOUND,
            },
        },
    },
    "/spots/{id}/book": {
        "post": {
            "summary": "Book a specific parking spot",
            "description": "Marks a parking spot as occupied/reserved. This is an 'Update' operation.",
            "parameters": [_id_parameter("book")],
            "requestBody": {
                "required": True,
                "content": {
                    "application/json": {
                        "schema": {
                            "type": "object",
                            "required": ["reservedBy"],
                            "properties": {
                                "reservedBy": {"type": "string", "example": "Alister"},
                            },
                        },
                    },
                },
            },
            "responses": {
                "200": {"description": "Spot booked successfully.", "content": _json("SpotAction")},
                "400": {"description": "Missing or empty reservedBy.", "content": _json("Message")},
                "404": NOT_FOUND,
                "409": {"description": "Conflict - Spot is already occupied.", "content": _json("Message")},
            },
        },
    },
    "/spots/{id}/vacate": {
        "post": {
            "summary": "Vacate a specific parking spot",
            "description": "Marks a parking spot as free/unreserved.",
            "parameters": [_id_parameter("vacate")],
            "responses": {
                "200": {"description": "Spot vacated successfully.", "content": _json("SpotAction")},
                "404": NOT_FOUND,
            },
        },
    },
}


def build_api_description(config: AppConfig) -> dict:
    """
    Build the OpenAPI 3.0 document for the spot endpoints.

    Only metadata (title, version, contact, server URL) comes from
    configuration; paths and schemas are static.
    """
    docs = config.docs
    return {
        "openapi": "3.0.0",
        "info": {
            "title": docs.title,
            "version": docs.version,
            "description": docs.description,
            "contact": {
                "name": docs.contact_name,
                "email": docs.contact_email,
            },
        },
        "servers": [
            {
                "url": config.server_url,
                "description": "Development server",
            },
        ],
        "components": {
            "schemas": {
                "ParkingSpot": PARKING_SPOT_SCHEMA,
                "Message": MESSAGE_SCHEMA,
                "SpotAction": SPOT_ACTION_SCHEMA,
            },
        },
        "paths": PATHS,
    }


def publish_api_description(app: FastAPI, config: AppConfig) -> None:
    """Serve the static description instead of FastAPI's generated schema."""
    app.openapi_schema = build_api_description(config)
