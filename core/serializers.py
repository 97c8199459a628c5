from rest_framework import serializers


class ReadOnlyModelSerializer(serializers.ModelSerializer):
    """Model serializer used for response shapes only."""

    def get_fields(self):
        fields = super().get_fields()
        for field in fields.values():
            field.read_only = True
        return fields

    def create(self, validated_data):  # pragma: no cover - never used for writes
        raise NotImplementedError("Response serializers are read-only.")

    def update(self, instance, validated_data):  # pragma: no cover - never used for writes
        raise NotImplementedError("Response serializers are read-only.")
