"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from scrap_paper.l1_entities.config import AppConfig
from scrap_paper.l2_use_cases.ports.blob_store import BlobStore
from scrap_paper.l2_use_cases.ports.config_loader import ConfigLoader
from scrap_paper.l2_use_cases.ports.surface_host import SurfaceHost
from scrap_paper.l3_interface_adapters.controllers.scratch_controller import ScratchController
from scrap_paper.l3_interface_adapters.gateways.file_blob_store import FileBlobStore
from scrap_paper.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from scrap_paper.l4_frameworks_and_drivers.config import storage_path


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        host: SurfaceHost,
        blob_store: BlobStore | None = None,
    ) -> None:
        self.config = config
        self.host = host
        self.blob_store: BlobStore = blob_store or FileBlobStore(storage_path(config))

        self.controller = ScratchController(
            config=config,
            host=host,
            store=self.blob_store,
        )

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
