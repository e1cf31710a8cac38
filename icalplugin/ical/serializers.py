from rest_framework import serializers


class IcalRequestSerializer(serializers.Serializer):
    properties = serializers.DictField(
        child=serializers.CharField(allow_blank=True),
        required=False,
        default=dict,
    )
    # Event values are checked by the renderer, which knows the scalar types it can write.
    events = serializers.ListField(
        child=serializers.DictField(),
        required=False,
        default=list,
    )
