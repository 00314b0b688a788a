"""Default values shared by the YouTrack models."""

EMPTY_STRING = ""
YOUTRACK_DEFAULT_ID = "0"
UNASSIGNED = "Unassigned"

# Names of the fields backing the fixed summary/description accessors
SUMMARY_FIELD = "Summary"
DESCRIPTION_FIELD = "Description"

# Field whose array value is converted to typed assignee records
ASSIGNEE_FIELD = "assignee"

# Reserved member name carrying the raw field array during deserialization
FIELD_ARRAY_KEY = "field"
