"""Pytest configuration for csvanalyzer tests."""

import pytest


@pytest.fixture
def mixed_document():
    """A small comma-separated document covering most type labels."""
    return (
        "id,name,email,joined,score,active,last_login\n"
        "1,Alice,alice@example.com,2024-01-15,3.5,yes,2024-01-15T08:30:00Z\n"
        "2,Bob,bob@example.org,2024-02-01,4,no,2024-02-01 09:00\n"
        "3,Carol,,2024-03-10,2.25,yes,\n"
        "4,Dave,dave@example.net,2024-04-22,5,no,2024-04-22T18:45:10.5+02:00\n"
    )


@pytest.fixture
def semicolon_document():
    """Semicolon-separated document with decimal commas."""
    return "produit;prix;quantite\npomme;1,50;10\npoire;2,75;4\nkiwi;0,80;12\n"
