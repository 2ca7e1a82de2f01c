"""Options controlling a glob invocation."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class GlobOptions(BaseModel):
    """Behaviour switches for the glob engine.

    The same model is stored as the ``[glob]`` section of the user
    configuration file, so persisted defaults and per-call options are
    validated identically.

    Attributes:
        case_sensitive: Compare names case-sensitively.
        include_hidden: Let wildcards and ``**`` match names beginning with ``.``.
        follow_symlinks: Descend into symbolic links to directories.
        sort: Return matches sorted by path string instead of discovery order.
        relative: Return paths relative to the base directory.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    case_sensitive: Annotated[bool, Field(description="Case-sensitive name matching")] = True
    include_hidden: Annotated[
        bool,
        Field(description="Match hidden entries with wildcards"),
    ] = False
    follow_symlinks: Annotated[
        bool,
        Field(description="Descend into symlinked directories"),
    ] = False
    sort: Annotated[bool, Field(description="Sort results by path string")] = True
    relative: Annotated[
        bool,
        Field(description="Return base-relative paths"),
    ] = False
