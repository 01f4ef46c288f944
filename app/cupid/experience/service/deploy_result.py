from dataclasses import dataclass


@dataclass(frozen=True)
class DeployResult:
    id: str
    url: str
