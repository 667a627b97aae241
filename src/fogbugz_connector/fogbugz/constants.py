"""Constants for the FogBugz XML API integration."""

from typing import Final

# Environment variable names
ENV_FOGBUGZ_URL: Final[str] = "FOGBUGZ_URL"
ENV_FOGBUGZ_EMAIL: Final[str] = "FOGBUGZ_EMAIL"
ENV_FOGBUGZ_PASSWORD: Final[str] = "FOGBUGZ_PASSWORD"
ENV_FOGBUGZ_SSL_VERIFY: Final[str] = "FOGBUGZ_SSL_VERIFY"
ENV_FOGBUGZ_CATEGORY_FILTER: Final[str] = "FOGBUGZ_CATEGORY_FILTER"

# Highest API version this connector has been tested against
SUPPORTED_API_VERSION: Final[int] = 7

# Well-known file names on a FogBugz server
API_ENDPOINT_FILENAME: Final[str] = "api.asp"
API_DISCOVERY_FILENAME: Final[str] = "api.xml"
ISSUE_PAGE_PREFIX: Final[str] = "default.asp?"

# Commands
CMD_LOGON: Final[str] = "logon"
CMD_LOGOFF: Final[str] = "logoff"
CMD_SEARCH: Final[str] = "search"
CMD_LIST_PROJECTS: Final[str] = "listProjects"
CMD_VIEW_PROJECT: Final[str] = "viewProject"
CMD_LIST_STATUSES: Final[str] = "listStatuses"
CMD_LIST_PEOPLE: Final[str] = "listPeople"
CMD_EDIT: Final[str] = "edit"
CMD_RESOLVE: Final[str] = "resolve"
CMD_CLOSE: Final[str] = "close"
CMD_NEW_FIX_FOR: Final[str] = "newFixFor"
CMD_VIEW_FIX_FOR: Final[str] = "viewFixFor"
CMD_EDIT_FIX_FOR: Final[str] = "editFixFor"

# Columns requested from the search command
ISSUE_SEARCH_COLUMNS: Final[tuple[str, ...]] = (
    "sTitle",
    "sLatestTextSummary",
    "ixStatus",
    "sStatus",
    "ixPersonOpenedBy",
    "dtOpened",
)

# Category types exposed to hosts
CATEGORY_TYPE_NAMES: Final[tuple[str, ...]] = ("Project",)

# Default values
DEFAULT_SSL_VERIFY: Final[bool] = True
