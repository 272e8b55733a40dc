"""
dataclasses package
-------------------
Value types passed between the conversion stages.

- FrontMatter: Presentation settings parsed from a document's YAML block
- RunConfig: Effective settings of one conversion
"""
from mdpress.dataclasses.front_matter import FrontMatter
from mdpress.dataclasses.run_config import RunConfig, merge_front_matter

__all__ = ["FrontMatter", "RunConfig", "merge_front_matter"]
