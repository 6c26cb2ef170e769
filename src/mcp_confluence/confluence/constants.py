"""Constants specific to Confluence operations."""

# Defaults of the site this server was first deployed against
DEFAULT_SPACE_KEY = "SD"
DEFAULT_SPACE_ID = "65877"

DEFAULT_TIMEOUT = 30.0

PAGE_STATUS_CURRENT = "current"

# create_page sends storage markup, update_page sends the Atlassian document
# format. The two endpoints are configured independently on the remote side.
CREATE_BODY_REPRESENTATION = "storage"
UPDATE_BODY_REPRESENTATION = "atlas_doc_format"
READ_BODY_FORMAT = "storage"

DEFAULT_RESULT_LIMIT = 25
MIN_RESULT_LIMIT = 1
MAX_RESULT_LIMIT = 100

STORAGE_FORMAT_EXAMPLE = """<?xml version="1.0" encoding="UTF-8"?>
<ac:confluence xmlns:ac="https://www.atlassian.com/schema/confluence/4/ac/">
  <p>Your content here</p>
  <ac:structured-macro ac:name="toc" />
</ac:confluence>"""
