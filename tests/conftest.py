from typing import Any

import pytest
import yaml

from manifest_labeler.config.settings import settings
from manifest_labeler.models import KubeAppLabels

DEPLOYMENT = b"""\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: shop
  labels:
    app: web
spec:
  replicas: 2
  template:
    metadata:
      labels:
        app: web
    spec:
      containers:
        - name: web
          image: nginx:1.25
"""

SERVICE = b"""\
apiVersion: v1
kind: Service
metadata:
  name: web
spec:
  ports:
    - port: 80
"""

LIST_MANIFEST = b"""\
apiVersion: v1
kind: List
items:
  - apiVersion: v1
    kind: ConfigMap
    metadata:
      name: settings
    data:
      mode: fast
  - apiVersion: v1
    kind: Secret
    metadata:
      name: creds
"""


def load_all(data: bytes) -> list[Any]:
    """Decode every non-empty document of a manifest."""
    return [d for d in yaml.safe_load_all(data) if d is not None]


@pytest.fixture
def app_labels() -> dict[str, str]:
    return KubeAppLabels(stack_id=42, stack_name="shop", owner="Jane Doe", kind="git").to_map()


@pytest.fixture
def multi_document_manifest() -> bytes:
    return b"---\n" + DEPLOYMENT + b"---\n---\n" + SERVICE + b"---\n"


@pytest.fixture
def strict_documents(monkeypatch):
    monkeypatch.setattr(settings, "strict_documents", True)
