"""Directory conventions shared by the template adapter and the facade."""

# Source id of ViewConfig.template_dir; pages from it carry no prefix.
ROOT_SOURCE_ID = "__ROOT__"

VIEWS_DIR = "views"
PARTIALS_DIR = "partials"
LAYOUTS_DIR = "layouts"
SYSTEM_DIR = "system"

DEFAULT_ADAPTER = "html"
JSON_ADAPTER = "json"
