from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    source_id: str
    target_id: str

    def touches(self, node_id: str) -> bool:
        return self.source_id == node_id or self.target_id == node_id
