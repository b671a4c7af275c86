"""GitHub Actions runner environment constants.

These are facts about how the runner talks to a step, independent of
any specific action.
"""

# Prefix of every input variable, e.g. INPUT_RELEASE_NAME
INPUT_PREFIX = "INPUT_"

# Prefix of file command variables, e.g. GITHUB_OUTPUT
FILE_COMMAND_PREFIX = "GITHUB_"

# Set to "1" by the runner when step debug logging is enabled
RUNNER_DEBUG = "RUNNER_DEBUG"

# Endpoints of github.com, used when the runner does not override them
# (GitHub Enterprise Server sets its own)
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_SERVER_URL = "https://github.com"
DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
