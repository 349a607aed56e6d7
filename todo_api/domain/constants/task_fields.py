"""Constants for Task model field names"""


class TaskFields:
    """Field name constants for Task model"""
    ID = "id"
    NAME = "name"
    STATUS = "status"
    CREATED_AT = "created_at"
    USER_ID = "user_id"

    # MongoDB specific
    MONGO_ID = "_id"
