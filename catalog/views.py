from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers
from rest_framework.response import Response
from rest_framework.views import APIView


class HealthCheckView(APIView):
    """Report that the API process is up"""

    @extend_schema(
        tags=['Health'],
        summary='Health check',
        responses=inline_serializer(
            name='HealthResponse',
            fields={'message': serializers.CharField()},
        ),
    )
    def get(self, request):
        return Response({'message': 'API is running'})
