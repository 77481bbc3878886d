from dependency_injector import containers, providers
from report_api.v1_0.repositories import PurchaseRepository
from report_api.v1_0.services import PurchaseService

class APIContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    purchase_repository = providers.Singleton(
        PurchaseRepository,
        id_policy = config.id_policy
    )
    purchase_service = providers.Singleton(
        PurchaseService,
        purchase_repository = purchase_repository
    )
