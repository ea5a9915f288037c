"""
Test Configuration - Externalized Test Data

This file contains all configurable test data, expected values, and test parameters.
Update values here when requirements change - no need to modify test scripts.

Structure:
- CONFIG: General test configuration
- EXPECTED: Expected values for validation tests
- TEST_DATA: Test input data (sample ideas, identifiers, documents)
- MESSAGES: Expected error messages and outputs
"""

import copy
from typing import Any, Dict, List


# =============================================================================
# GENERAL TEST CONFIGURATION
# =============================================================================

CONFIG = {
    # Environment settings for tests
    "environments": {
        "production": "production",
        "development": "development",
        "test": "test",
    },

    # Collection the ideas live in
    "table": "ideas",

    # Directories
    "test_output_dir": "test_results",

    # Storage backends the app can run on
    "available_backends": ["sqlite", "airtable", "memory"],
}


# =============================================================================
# EXPECTED VALUES FOR VALIDATION
# =============================================================================

EXPECTED = {
    # Configuration defaults
    "config": {
        "default_storage": "sqlite",
        "default_table": "ideas",
        "default_port": 5001,
        "default_timeout_range": (5, 120),  # min, max seconds
        "required_airtable_vars": [
            "AIRTABLE_API_KEY",
            "AIRTABLE_BASE_ID",
        ],
    },

    # Record keys handed out by the stores
    "keys": {
        "length": 20,
        "alphabet": "abcdefghijklmnopqrstuvwxyz0123456789",
    },

    # HTTP status per error kind
    "http_status": {
        "invalid_identifier": 400,
        "invalid_input": 400,
        "not_found": 404,
        "storage_failure": 500,
    },

    # Form/list texts
    "views": {
        "submit_success": "idea submitted successfully",
        "empty_list": "No ideas submitted yet. Be the first!",
    },
}


# =============================================================================
# TEST DATA - SAMPLE IDEAS AND IDENTIFIERS
# =============================================================================

TEST_DATA = {
    # Ideas as a user would submit them
    "sample_ideas": [
        {
            "title": "Test Idea",
            "description": "d",
            "tags": ["a", "b"],
        },
        {
            "title": "Neighbourhood tool library",
            "description": "Lend drills and ladders to the people on your street",
            "tags": ["community", "sharing"],
        },
        {
            "title": "Plant watering reminder",
            "description": "Nudges based on pot size and season",
            "tags": [],
        },
    ],

    # Ids that must be rejected before any store call
    "malformed_ids": [
        "",
        "ideas",
        "ideas:",
        ":abc",
        ":",
        "ideas:abc:def",
        "ideas::abc",
        "no colon at all",
    ],

    # Well-formed ids that point at nothing
    "missing_ids": [
        "ideas:doesnotexist00000000",
        "ideas:x",
    ],

    # A document stored before the checklist and notes existed
    "legacy_document": {
        "id": "ideas:test",
        "title": "Old Idea",
        "description": "From before development fields existed",
        "tags": ["old"],
    },

    # Checklist used by the end-to-end scenario
    "what_must_be_true": ["x", "y"],
    "development_notes": "n",
}


# =============================================================================
# ERROR MESSAGES - Expected messages for validation
# =============================================================================

MESSAGES = {
    # Substrings of error messages
    "errors": {
        "invalid_id": "Invalid ID format",
        "not_found": "Idea not found",
        "empty_title": "title is required",
        "missing_field": "Missing field",
    },

    # Configuration error messages (substrings to check)
    "config_errors": {
        "missing_api_key": "AIRTABLE_API_KEY",
        "missing_base_id": "AIRTABLE_BASE_ID",
        "bad_backend": "IDEAS_STORAGE",
        "bad_table": "IDEAS_TABLE",
    },

    # CLI help text (substrings that should appear)
    "cli_help": {
        "storage": "--storage",
        "db_path": "--db-path",
        "port": "--port",
        "show_config": "--show-config",
    },
}


# =============================================================================
# TEST CATEGORIES - used by the report in conftest.py
# =============================================================================

TEST_CATEGORIES = {
    "models": {
        "name": "Idea Model",
        "description": "Ids, serialization, legacy defaults, record conversion",
        "protects_against": ["Malformed ids reaching the store", "Lossy conversion"],
    },
    "storage": {
        "name": "Record Stores",
        "description": "SQLite, in-memory and Airtable backends",
        "protects_against": ["Upsert on update", "Errors on missing records"],
    },
    "service": {
        "name": "Idea Endpoints",
        "description": "Submit, list, get, update, delete",
        "protects_against": ["Wrong error kinds", "Path id ignored on update"],
    },
    "web_app": {
        "name": "Web Application",
        "description": "HTTP routes, status codes, pages",
        "protects_against": ["Unhandled exceptions", "Wrong status codes"],
    },
    "views": {
        "name": "Views",
        "description": "Form, list and development state machines",
        "protects_against": ["Stale auto-saves", "Delete without confirmation"],
    },
    "client": {
        "name": "HTTP Client",
        "description": "Error kinds rebuilt from responses",
        "protects_against": ["Untyped errors"],
    },
    "system_config_validation": {
        "name": "Configuration Validation",
        "description": "Env vars, defaults and error messages",
        "protects_against": ["Silent misconfiguration"],
    },
    "system_end_to_end": {
        "name": "End-to-End",
        "description": "Submit, list, develop and delete through HTTP",
        "protects_against": ["Broken wiring between layers"],
    },
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_sample_idea(index: int = 0) -> Dict[str, Any]:
    """Get a copy of a sample idea's submit fields."""
    return copy.deepcopy(TEST_DATA["sample_ideas"][index])


def get_all_sample_ideas() -> List[Dict[str, Any]]:
    """Get copies of every sample idea."""
    return copy.deepcopy(TEST_DATA["sample_ideas"])
