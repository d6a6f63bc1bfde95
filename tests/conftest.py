# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Record types shared by the test modules. They live at module level
# so that string annotations ("Node", "Book") resolve through
# typing.get_type_hints.
#
# ==============================================

import os
from dataclasses import dataclass
from typing import Annotated, List, Optional

import pytest

from tago import Tag, Tago, tagged
from tago import config as config_module


@dataclass
class FlatModel:
    Field1: str = tagged(gorm2="preload=true;otherOption=value", default="")
    Field2: int = 0


@dataclass
class NestedModel:
    Subfield1: str = tagged(gorm2="otherOption=value2", default="")


@dataclass
class MyModel:
    Field1: str = tagged(gorm2="preload=true;otherOption=value", default="")
    Field2: int = 0
    Field3: NestedModel = tagged(gorm2="preload=true", default_factory=NestedModel)


@dataclass
class Node:
    name: str = tagged(gorm2="index", default="")
    parent: Optional["Node"] = tagged(gorm2="preload=true", default=None)
    children: List["Node"] = tagged(gorm2="preload=false", default_factory=list)


@dataclass
class Author:
    name: str = tagged(gorm2="index", default="")
    books: List["Book"] = tagged(gorm2="preload=true", default_factory=list)


@dataclass
class Book:
    title: str = tagged(gorm2="index", default="")
    author: Optional[Author] = tagged(gorm2="preload=true", default=None)


@dataclass
class City:
    zip_code: str = tagged(mask="partial", default="")
    name: str = ""


@dataclass
class Address:
    city: Optional[City] = tagged(mask="skip", default=None)


@dataclass
class Customer:
    email: str = tagged(mask="full;hash=sha256", default="")
    addresses: List[Optional[Address]] = tagged(default_factory=list)


@dataclass
class Account:
    email: Annotated[str, Tag(validate="required;email")] = ""
    nickname: Annotated[str, Tag(validate="max=20")] = tagged(validate="max=32", default="")
    age: int = tagged(validate=18, default=0)


@pytest.fixture
def gorm2():
    """Tago reading the gorm2 tag."""
    return Tago(name="gorm2")


@pytest.fixture
def mask():
    """Tago reading the mask tag."""
    return Tago(name="mask")


@pytest.fixture
def calls():
    """Collects (label, field) pairs recorded by dispatch actions."""
    return []


@pytest.fixture
def fresh_config(monkeypatch, tmp_path):
    """Reset the config singleton and isolate the environment and .env lookup."""
    monkeypatch.setattr(config_module, "_config_instance", None)
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for name in ("TAGO_TAG_NAME", "TAGO_SEPARATOR", "TAGO_LOG_LEVEL"):
        os.environ.pop(name, None)
    monkeypatch.chdir(tmp_path)
    return tmp_path
