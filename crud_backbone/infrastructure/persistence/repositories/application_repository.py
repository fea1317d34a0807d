"""ApplicationRepository - SQLAlchemy implementation of ApplicationRepository protocol."""

from sqlalchemy import select

from crud_backbone.domain.entities.application import Application
from crud_backbone.infrastructure.persistence.models.application import (
    Application as ApplicationModel,
)
from crud_backbone.infrastructure.persistence.repositories.base_repository import (
    SQLAlchemyRepository,
)


class ApplicationRepository(SQLAlchemyRepository[ApplicationModel, Application]):
    """Persistence for API consumers and their access keys."""

    model = ApplicationModel
    resource_type = "Application"
    writable_fields = ("key", "label")
    unique_fields = ("key", "label")
    sortable_fields = frozenset({"id", "label", "created_at", "updated_at"})
    filterable_fields = frozenset({"label"})

    async def find_by_key(self, key: str) -> Application | None:
        """Find application by access key.

        Args:
            key: Access key presented as a bearer token.

        Returns:
            Domain Application entity if found, None otherwise.
        """
        stmt = select(ApplicationModel).where(ApplicationModel.key == key)
        result = await self.session.execute(stmt)
        application_model = result.scalar_one_or_none()

        if application_model is None:
            return None

        return self._to_domain(application_model)

    def _to_domain(self, application_model: ApplicationModel) -> Application:
        return Application(
            id=application_model.id,
            key=application_model.key,
            label=application_model.label,
            created_at=application_model.created_at,
            updated_at=application_model.updated_at,
        )
