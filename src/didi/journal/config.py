"""Display options for listing and searching.

Pure data container. The CLI builds one from its flags and config
defaults; the store and query code never look at it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DisplayConfig:
    """What to render for each entry.

    Attributes:
        show_date: Print the creation timestamp.
        show_ids: Print the entry id.
        show_hashes: Print the entry fingerprint.
        show_keywords: Print the keyword list.
        show_content: Print the entry body.
        include_hidden: Include hidden entries at all.
    """

    show_date: bool = True
    show_ids: bool = False
    show_hashes: bool = False
    show_keywords: bool = False
    show_content: bool = True
    include_hidden: bool = False
