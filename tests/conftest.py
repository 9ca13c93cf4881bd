# tests/conftest.py
"""Shared enumeration declarations for the test suite."""
from __future__ import annotations
import pytest

from enumeration import Enumeration


class Animal(Enumeration):
    Horse = 0
    Dog = 1


class Color(Enumeration):
    Red = "red"
    Green = "green"
    Blue = "blue"


class Mixed(Enumeration):
    Zero = 0
    ZeroText = "0"
    ZeroFloat = 0.0
    No = False
    Yes = True


class Status(Enumeration):
    Active = 1
    Enabled = 1      # duplicate value, first declared wins on reverse lookup
    Retired = 2


class Empty(Enumeration):
    pass


@pytest.fixture
def animal():
    return Animal


@pytest.fixture
def color():
    return Color


@pytest.fixture
def mixed():
    return Mixed


@pytest.fixture
def status():
    return Status


@pytest.fixture
def empty():
    return Empty
