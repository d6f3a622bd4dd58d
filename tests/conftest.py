"""Shared state machine documents for the test suite."""

import copy

import pytest

JOURNEY_MACHINE = {
    "name": "Real Beneficiary",
    "version": "2.0",
    "description": "Real beneficiary registration",
    "initialState": "entry_point",
    "finalStates": ["application_complete", "application_rejected"],
    "journeys": [
        {
            "id": "new_trade_name",
            "label": "New Trade Name",
            "routinePrefixes": ["routine1_"],
            "seedStates": ["collect_beneficiary_info"],
        },
        {
            "id": "existing_trade_name",
            "name": "Existing Trade Name",
            "routine_prefixes": ["routine2_"],
        },
        {
            "id": "existing_trade_license",
            "suggestedJourney": "Existing License",
            "pathStates": ["verify_license"],
        },
    ],
    "states": {
        "entry_point": {
            "type": "process",
            "description": "Start of the application",
            "function": "start_application",
            "transitions": [
                {"condition": "true", "target": "customer_application_type_selection", "action": "begin"}
            ],
        },
        "customer_application_type_selection": {
            "type": "decision",
            "description": "Choose the application type",
            "controlAttribute": "application_type",
            "transitions": [
                {
                    "condition": "application_type == 'new'",
                    "target": "routine1_collect_info",
                    "action": "route_new",
                },
                {
                    "condition": "application_type == 'existing'",
                    "target": "routine2_collect_info",
                    "action": "route_existing",
                    "controlAttribute": "application_type",
                    "controlAttributeValue": "existing",
                },
            ],
        },
        "routine1_collect_info": {
            "type": "process",
            "description": "Collect new trade name details",
            "transitions": [{"condition": "", "target": "collect_beneficiary_info", "action": "next"}],
        },
        "routine2_collect_info": {
            "type": "process",
            "description": "Collect existing trade name details",
            "nextState": "verify_license",
            "transitions": [
                {"condition": 'input.role == "executive"', "target": "verify_license", "action": "verify"}
            ],
        },
        "collect_beneficiary_info": {
            "type": "process",
            "description": "Collect beneficiary information",
            "functions": ["collect_owner", "collect_shares"],
            "relevantChunks": [
                {
                    "chunk_id": "c1",
                    "arabic_original": {"text": "نص المادة الأولى"},
                    "english_translation": {"text": "Text of the first article"},
                    "pages_arabic": [12],
                }
            ],
            "transitions": [{"condition": "isComplete", "target": "application_complete", "action": "complete"}],
        },
        "verify_license": {
            "type": "decision",
            "description": "Verify the trade license",
            "transitions": [
                {"condition": "license_valid == true", "target": "application_complete", "action": "approve"},
                {"condition": "license_valid == false", "target": "application_rejected", "action": "reject"},
            ],
        },
        "application_complete": {"type": "final", "description": "Application completed"},
        "application_rejected": {"type": "final", "description": "Application rejected"},
    },
}

LEGACY_MACHINE = {
    "name": "Legacy Beneficiary",
    "version": "1.0",
    "description": "Document without journey definitions",
    "initialState": "entry_point",
    "finalStates": ["done"],
    "states": {
        "entry_point": {
            "type": "process",
            "description": "Start",
            "transitions": [{"condition": "true", "target": "routine2_collect_info", "action": "go"}],
        },
        "routine1_collect_info": {"type": "process", "description": "New"},
        "routine2_collect_info": {
            "type": "process",
            "description": "Existing",
            "transitions": [{"condition": "done == 'yes'", "target": "done", "action": "finish"}],
        },
        "routine3_collect_info": {"type": "process", "description": "License"},
        "done": {"type": "final", "description": "Done"},
    },
}


@pytest.fixture
def journey_machine():
    return copy.deepcopy(JOURNEY_MACHINE)


@pytest.fixture
def legacy_machine():
    return copy.deepcopy(LEGACY_MACHINE)
