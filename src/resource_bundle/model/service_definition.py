from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ServiceDefinition:
    """A service registered in the container builder."""

    class_name: Optional[str]
    arguments: List[Any] = field(default_factory=list)
    tags: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    public: bool = True
    factory: Optional[str] = None

    def add_tag(self, name: str, **attributes: Any) -> "ServiceDefinition":
        self.tags[name] = attributes
        return self
