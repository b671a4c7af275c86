"""Line ending used after every workflow command.

The runner's log scanner and file-command parser are line oriented and
expect the host's native line ending.
"""

import os

EOL = "\r\n" if os.name == "nt" else "\n"
