from typing import Literal, get_args

INTEGRATION_KEYS = Literal["jira", "github", "slack", "teams", "calendar"]

# Stable display order; the toggle map always holds exactly these keys
INTEGRATION_ORDER: tuple[str, ...] = get_args(INTEGRATION_KEYS)

INTEGRATION_META = {
    "jira": {"label": "Jira"},
    "github": {"label": "GitHub"},
    "slack": {"label": "Slack"},
    "teams": {"label": "Microsoft Teams"},
    "calendar": {"label": "Calendar"},
}

LOGIN_PROVIDERS = ("google", "outlook", "zoho")
