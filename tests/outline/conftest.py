"""Pytest fixtures for outline tests."""

import pytest


@pytest.fixture
def ledger_doc() -> str:
    """A beancount ledger with nested star headings."""
    return """\
;; -*- mode: beancount -*-
option "title" "Household"

* Options
option "operating_currency" "EUR"

* Accounts  ;#region
** Assets
2024-01-01 open Assets:Bank:Checking EUR
2024-01-01 open Assets:Cash EUR
** Expenses
*** Groceries
2024-01-01 open Expenses:Food:Groceries
*** Rent
2024-01-01 open Expenses:Housing:Rent

* Transactions
2024-02-01 * "Landlord" "February rent"
  Expenses:Housing:Rent   900.00 EUR
  Assets:Bank:Checking
"""


@pytest.fixture
def skipped_level_doc() -> str:
    """A document jumping from level 1 straight to level 3."""
    return """\
* Top
*** Too deep
"""


@pytest.fixture
def no_headings_doc() -> str:
    """A document without any heading lines."""
    return """\
option "title" "Flat"
2024-01-01 open Assets:Cash EUR
"""
