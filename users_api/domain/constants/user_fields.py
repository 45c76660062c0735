"""Constants for User document field names"""


class UserFields:
    """Field name constants for User documents"""
    NAME = "name"
    EMAIL = "email"
    CREATED_AT = "createdAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
