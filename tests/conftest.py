"""Test fixtures for bodyfile."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(scope="session")
def powershell_line() -> str:
    # EVTX-derived record whose name is a JSON blob containing '|'
    return (
        '0|{"activity_id":null,"channel_name":"Microsoft-Windows-PowerShell/Operational",'
        '"custom_data":{"EventData":{"ContextInfo":"Host Application = powershell '
        'get-VMNetworkAdapter -ManagementOS | fl | out-file -encoding ASCII '
        'VMNetworkAdapterInstances.txt"}},"event_id":4100,"event_record_id":2424468,'
        '"provider_name":"Microsoft-Windows-PowerShell"}|0||0|0|0|-1|1645178371|-1|-1'
    )
