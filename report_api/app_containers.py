from dependency_injector import containers, providers
from report_api.v1_0.v1_containers import APIContainer

class ApplicationContainer(containers.DeclarativeContainer):
    """
    One instance per FastAPI app; routers resolve providers through
    ``request.app.state.container`` so apps never share a store.
    """
    config = providers.Configuration()

    api_container = providers.Container(
        APIContainer,
        config = config.api
    )
