"""Constants for User table and column names"""


class UserFields:
    """Field name constants for the Users table"""
    TABLE = "Users"
    ID = "Id"
    FULL_NAME = "FullName"
    
    # SQLite column-name marker that selects the UUID converter
    ID_AS_UUID = 'Id AS "Id [uuid]"'
