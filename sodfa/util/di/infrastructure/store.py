"""Document store infrastructure providers."""

from dishka import Scope, provide
from google.cloud import firestore

from sodfa.adapter.store import DocumentStore
from sodfa.adapter.store.firestore import FirestoreDocumentStore
from sodfa.config import Settings
from sodfa.util.di.base import ProviderBase


class StoreProvider(ProviderBase):
    """Document store component base."""

    __mock_component__ = "store"


class ProdStoreProvider(StoreProvider):
    """Production store provider using Cloud Firestore."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_firestore_client(self, settings: Settings) -> firestore.AsyncClient:
        """Provide async Firestore client.

        Credentials come from Application Default Credentials (or the
        FIRESTORE_EMULATOR_HOST emulator when set).
        """
        return firestore.AsyncClient(
            project=settings.firebase.project_id,
            database=settings.firebase.database,
        )

    @provide(scope=Scope.APP)
    def get_document_store(self, client: firestore.AsyncClient) -> DocumentStore:
        """Provide Firestore-backed document store."""
        return FirestoreDocumentStore(client)
