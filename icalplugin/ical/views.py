import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import InvalidFieldValue
from .response import reply_ical
from .serializers import IcalRequestSerializer

logger = logging.getLogger(__name__)


@extend_schema(tags=['iCalendar'])
class IcalRenderView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary='Render events as an iCalendar document',
        request=IcalRequestSerializer,
        responses={
            200: OpenApiResponse(response=OpenApiTypes.STR, description='text/calendar document'),
            400: OpenApiResponse(description='Invalid properties or event values'),
        },
    )
    def post(self, request):
        ser = IcalRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            return reply_ical(ser.validated_data)
        except InvalidFieldValue as e:
            logger.warning('Rejected iCalendar render request: %s', e)
            return Response({'detail': str(e)}, status=status.HTTP_400_BAD_REQUEST)
