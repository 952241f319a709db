"""Pydantic models for graph options and graph documents."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GraphOptions(BaseModel):
    """Rendering options for a graph.

    Every option is defaulted on its own. Flags are coerced to booleans;
    all other values are passed through to the renderer as given, without
    type or range checks.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    antialias: bool = False
    size_attenuation: bool = Field(default=False, alias="sizeAttenuation")
    node_image: Any = Field(default=None, alias="nodeImage")
    node_image_transparent: bool = Field(default=False, alias="nodeImageTransparent")
    node_size: Any = Field(default=10, alias="nodeSize")
    edge_width: Any = Field(default=1, alias="edgeWidth")
    edge_opacity: Any = Field(default=1, alias="edgeOpacity")
    bg_color: Any = Field(default="white", alias="bgColor")
    bg_opacity: Any = Field(default=1, alias="bgOpacity")

    @field_validator(
        "antialias",
        "size_attenuation",
        "node_image_transparent",
        mode="before",
    )
    @classmethod
    def coerce_flag(cls, value: Any) -> bool:
        """Treat any truthy value as enabled."""
        return bool(value)

    @field_validator("node_image", mode="before")
    @classmethod
    def empty_image_is_none(cls, value: Any) -> Any:
        """An empty image path means no image."""
        return value or None

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:
        """Explicit nulls fall back to the default, like a missing key."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_config(self) -> dict[str, Any]:
        """Return the options keyed by their camelCase names."""
        return self.model_dump(by_alias=True)


class NodeSpec(BaseModel):
    """A node declared in a graph document."""

    model_config = ConfigDict(extra="allow")

    id: str | int | float | None = None
    label: str | None = None
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @property
    def attributes(self) -> dict[str, Any]:
        """Extra keys beyond id, label and position."""
        return dict(self.model_extra or {})


class EdgeSpec(BaseModel):
    """An edge declared in a graph document."""

    source: str | int | float
    target: str | int | float
    attributes: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_edge(cls, data: Any) -> Any:
        """Normalize shorthand edge syntax.

        Accepts ``[a, b]`` and ``{nodes: [a, b], ...}`` besides the full
        ``{source: a, target: b}`` form. Keys other than the endpoints are
        collected into ``attributes``.
        """
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"An edge needs exactly two endpoints, got {len(data)}")
            return {"source": data[0], "target": data[1]}

        if not isinstance(data, dict):
            return data

        data = dict(data)
        if "nodes" in data:
            endpoints = data.pop("nodes")
            if not isinstance(endpoints, (list, tuple)) or len(endpoints) != 2:
                raise ValueError("'nodes' must list exactly two endpoints")
            data["source"], data["target"] = endpoints

        attributes = dict(data.pop("attributes", None) or {})
        for key in list(data):
            if key not in ("source", "target"):
                attributes[key] = data.pop(key)
        data["attributes"] = attributes

        return data


class GraphDocument(BaseModel):
    """Root model for a graph YAML file."""

    options: GraphOptions = Field(default_factory=GraphOptions)
    nodes: list[NodeSpec] = Field(default_factory=list)
    edges: list[EdgeSpec] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data: Any) -> Any:
        """Treat null sections as empty."""
        if not isinstance(data, dict):
            return data

        for key in ("options", "nodes", "edges"):
            if key in data and data[key] is None:
                data.pop(key)

        return data

    def get_node_ids(self) -> list[str | int | float]:
        """Get the identifiers of all declared nodes, in order."""
        return [node.id for node in self.nodes if node.id is not None]
