"""Core exceptions for Blogforge."""


class BlogforgeError(Exception):
    """Base exception for all Blogforge errors."""


class ConfigError(BlogforgeError):
    """Raised when a configuration file cannot be loaded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config at '{path}': {reason}")


class SourceQueryError(BlogforgeError):
    """Raised when the content source cannot answer a query."""


class FrontmatterError(SourceQueryError):
    """Raised when YAML frontmatter of a markdown file is invalid."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid frontmatter in '{path}': {reason}")


class PipelineError(BlogforgeError):
    """Base class for defects in the ordering of the generation pass."""


class MissingDerivedFieldError(PipelineError):
    """Raised when a node reaches the planner without a derived field."""

    def __init__(self, node_id: str, field: str) -> None:
        self.node_id = node_id
        self.field = field
        super().__init__(f"Node '{node_id}' is missing derived field '{field}'.")


class DerivedFieldAlreadySetError(PipelineError):
    """Raised when a derived field is written a second time."""

    def __init__(self, node_id: str, field: str) -> None:
        self.node_id = node_id
        self.field = field
        super().__init__(f"Derived field '{field}' is already set on node '{node_id}'.")


class HierarchyLookupError(PipelineError):
    """Raised when a node's position in the file tree cannot be resolved."""

    def __init__(self, node_id: str, reason: str) -> None:
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"Cannot resolve file location of node '{node_id}': {reason}")


class DuplicateSlugError(PipelineError):
    """Raised when two source files derive the same slug."""

    def __init__(self, slug: str, paths: tuple[str, str]) -> None:
        self.slug = slug
        self.paths = paths
        super().__init__(f"Slug '{slug}' derived from both '{paths[0]}' and '{paths[1]}'.")


class RegistryError(BlogforgeError):
    """Base class for page registry errors."""


class DuplicatePageError(RegistryError):
    """Raised when a route is registered twice."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"A page is already registered at '{path}'.")
