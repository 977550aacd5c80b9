"""Constants for Record model field names"""


class RecordFields:
    """Field name constants for Record model (stored document keys)"""
    MOBILE = "mobile"
    NAME = "name"
    DOB = "dob"
    EMAIL = "email"
    EMPLOYEE_TYPE = "employeeType"
    PANCARD = "pancard"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields backed by a unique index
    UNIQUE = (MOBILE, EMAIL, PANCARD)

    # Every declared field (anything else is stored as-is)
    DECLARED = (MOBILE, NAME, DOB, EMAIL, EMPLOYEE_TYPE, PANCARD)
