from dataclasses import dataclass


@dataclass(frozen=True)
class Notice:
    title: str
    description: str | None = None
    variant: str = "default"  # "default" | "destructive"
