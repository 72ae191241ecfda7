"""Implementor index schemas — data models for fragments and trait pages.

An ImplementorTable is plain data: package name -> ordered list of
pre-rendered descriptor strings. Descriptors are opaque markup produced by
the documentation generator and are never parsed here.
"""

from typing import Callable, Optional

from pydantic import BaseModel, Field

PackageName = str
ImplementorDescriptor = str
ImplementorTable = dict[PackageName, list[ImplementorDescriptor]]
AggregatorHook = Callable[[ImplementorTable], object]


class FragmentDefinition(BaseModel):
    """One generated fragment: the implementor table for a single trait.

    Packages listed with an empty list were checked and have no
    implementors, which is different from a package being absent.

    Descriptor text is never inspected, so empty or malformed markup loads
    as-is. A descriptor that is not a string at all fails validation, and
    the catalog skips the whole fragment.
    """

    # Identity
    trait_path: str = Field(
        ...,
        description="Fully qualified trait path (e.g. 'core::default::Default')",
    )
    trait_name: str = Field(
        ...,
        description="Short trait name as shown on the page (e.g. 'Default')",
    )
    trait_href: str = Field(
        default="",
        description="Link to the trait's own documentation page",
    )
    description: str = Field(
        default="",
        description="One-line summary of the trait",
    )

    # Payload
    implementors: ImplementorTable = Field(
        default_factory=dict,
        description="Package name -> ordered implementor descriptors. "
        "Descriptors are pre-rendered markup, passed through unchanged.",
    )


class FragmentSummary(BaseModel):
    """Lightweight summary for listing fragments."""

    trait_path: str
    trait_name: str
    package_count: int = 0
    implementor_count: int = 0
    packages: list[str] = Field(default_factory=list)


class ImplementorEntry(BaseModel):
    """A single row of a trait page's Implementors section."""

    package: str
    descriptor: str


class ImplementorsSection(BaseModel):
    """What the page-side aggregator collected for one trait page."""

    trait_path: str
    current_package: Optional[str] = Field(
        default=None,
        description="Package whose own page is being shown; its implementors "
        "are rendered statically and skipped here",
    )
    packages: list[str] = Field(
        default_factory=list,
        description="Packages received from tables, in first-seen order, "
        "including ones with no implementors",
    )
    entries: list[ImplementorEntry] = Field(default_factory=list)
    tables_received: int = 0
