"""Parser configuration.

Defaults reproduce the classic Gemtext line rules exactly.  Two behaviours can
be switched on deliberately, either in code via ``ParseOptions`` or through the
environment (optionally from a project-root .env file):

    GEMTEXT_HEADING_MODE           "window" (default) or "leading"
    GEMTEXT_PRESERVE_PRE_NEWLINES  "false" (default) or "true"

heading_mode
    "window"  -- count "#" characters in the first three characters of the line
                 and slice off exactly that many; "#####x" is level 3 with
                 content "##x".
    "leading" -- count every leading "#", cap the level at 3, and strip all of
                 them; "#####x" is level 3 with content "x".

preserve_pre_newlines
    False -- preformatted body lines are concatenated with no separator.
    True  -- body lines are joined with "\\n".
"""

import logging
import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()

HEADING_MODE_ENV = "GEMTEXT_HEADING_MODE"
PRESERVE_PRE_NEWLINES_ENV = "GEMTEXT_PRESERVE_PRE_NEWLINES"


class ParseOptions(BaseModel):
    """Switches for the two behaviours that differ from the classic rules."""

    model_config = ConfigDict(frozen=True)

    heading_mode: Literal["window", "leading"] = "window"
    preserve_pre_newlines: bool = False


def load_options(env_file: Path = ROOT / ".env") -> ParseOptions:
    """Build ParseOptions from the environment, loading ``env_file`` first if present.

    Variables already set in the environment win over the .env file.
    """
    load_dotenv(env_file)
    options = ParseOptions(
        heading_mode=os.getenv(HEADING_MODE_ENV, "window"),
        preserve_pre_newlines=os.getenv(PRESERVE_PRE_NEWLINES_ENV, "false"),
    )
    logger.debug("Loaded parse options: %s", options)
    return options
