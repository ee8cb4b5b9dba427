"""Data models for Manifest Labeler."""

from __future__ import annotations

from dataclasses import dataclass

from manifest_labeler.utils.sanitize import sanitize_label

LABEL_APP_STACK = "io.portainer.kubernetes.application.stack"
LABEL_APP_STACK_ID = "io.portainer.kubernetes.application.stackid"
LABEL_APP_NAME = "io.portainer.kubernetes.application.name"
LABEL_APP_OWNER = "io.portainer.kubernetes.application.owner"
LABEL_APP_KIND = "io.portainer.kubernetes.application.kind"

APP_LABEL_KEYS: tuple[str, ...] = (
    LABEL_APP_STACK_ID,
    LABEL_APP_STACK,
    LABEL_APP_NAME,
    LABEL_APP_OWNER,
    LABEL_APP_KIND,
)


@dataclass
class KubeAppLabels:
    """Labels applied to every resource deployed as part of a stack."""

    stack_id: int
    stack_name: str
    owner: str
    kind: str

    def to_map(self) -> dict[str, str]:
        return {
            LABEL_APP_STACK_ID: str(self.stack_id),
            LABEL_APP_STACK: self.stack_name,
            LABEL_APP_NAME: self.stack_name,
            LABEL_APP_OWNER: sanitize_label(self.owner),
            LABEL_APP_KIND: self.kind,
        }


def get_helm_app_labels(name: str, owner: str) -> dict[str, str]:
    """Return the labels applied to helm-deployed applications."""
    return {
        LABEL_APP_NAME: name,
        LABEL_APP_OWNER: sanitize_label(owner),
    }
