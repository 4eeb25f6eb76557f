from django.utils import translation
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from apps.common.dashboard import collect_dashboard_cards
from apps.common.i18n import resolve_language
from .serializers import DashboardCardSerializer

logger = get_logger(__name__).bind(component="payments", layer="view")


class AdminDashboardView(APIView):
    permission_classes = [IsAdminUser]
    log = logger.bind(view="AdminDashboardView")

    @extend_schema(
        summary="Admin dashboard cards",
        parameters=[
            OpenApiParameter(
                name="lang",
                description="Language used for card labels",
                required=False,
                type=str,
            ),
        ],
        responses={
            200: DashboardCardSerializer(many=True),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        language = resolve_language(request)
        with translation.override(language):
            cards = collect_dashboard_cards()
        self.log.debug("Serving dashboard cards", language=language, cards=sorted(cards))
        payload = [{"key": key, **card} for key, card in cards.items()]
        return Response(DashboardCardSerializer(payload, many=True).data)
