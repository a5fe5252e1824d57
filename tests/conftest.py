from __future__ import annotations

from pathlib import Path
import sqlite3

import pytest

_SCHEMA = """
CREATE TABLE Categories (
    CategoryID INTEGER PRIMARY KEY,
    CategoryName NVARCHAR(15) NOT NULL,
    Description TEXT
);
CREATE TABLE Suppliers (
    SupplierCode VARCHAR(5) PRIMARY KEY,
    CompanyName TEXT NOT NULL
);
CREATE TABLE Products (
    ProductID INTEGER PRIMARY KEY,
    SupplierCode VARCHAR(5) REFERENCES Suppliers (SupplierCode),
    ProductName TEXT NOT NULL
);
CREATE TABLE Shippers (
    ShipperID INTEGER PRIMARY KEY,
    CompanyName TEXT
);
CREATE TABLE tblLookup (
    LookupID INTEGER PRIMARY KEY,
    LookupKey TEXT NOT NULL,
    LookupVal TEXT NOT NULL,
    LookupDescLong TEXT
);

INSERT INTO Categories VALUES (1, 'Beverages', 'Soft drinks, coffees, teas');
INSERT INTO Categories VALUES (2, 'Condiments', 'Sweet and savory sauces');
INSERT INTO Suppliers VALUES ('EXOTL', 'Exotic Liquids');
INSERT INTO Suppliers VALUES ('NEWOR', 'New Orleans Cajun Delights');
INSERT INTO Products VALUES (1, 'EXOTL', 'Chai');
INSERT INTO tblLookup VALUES (1, 'AssignStatusStr', 'F', 'Fully');
INSERT INTO tblLookup VALUES (2, 'AssignStatusStr', 'P', 'Partly');
INSERT INTO tblLookup VALUES (3, 'BatchAutoGenModeStr', 'E', 'Assign to existing batch');
"""


@pytest.fixture
def lookup_db(tmp_path: Path) -> Path:
    """SQLite file with a few lookup tables and one MUCK table."""
    db_path = tmp_path / "lookup.db"
    conn = sqlite3.connect(str(db_path))
    try:
        conn.executescript(_SCHEMA)
        conn.commit()
    finally:
        conn.close()
    return db_path
