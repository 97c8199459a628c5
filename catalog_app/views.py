from django.http import HttpResponse, HttpResponseRedirect
from django.utils.http import content_disposition_header
from drf_yasg import openapi
from drf_yasg.inspectors import SwaggerAutoSchema
from drf_yasg.utils import is_form_media_type, swagger_auto_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import InvalidProductInput
from core.schemas import DEFAULT_IMAGE_TYPE
from .payloads import IMAGE_PART, PRODUCT_PART, read_image, read_product_data
from .serializers import ProductResponseSerializer
from .services import ProductService, get_product_service


PRODUCT_FORM_PARAMETERS = [
    openapi.Parameter(
        name=PRODUCT_PART,
        in_=openapi.IN_FORM,
        type=openapi.TYPE_STRING,
        required=True,
        description='Product JSON as string, e.g. {"name": "Widget", "price": "9.99"}.',
    ),
]


def _image_parameter(required: bool) -> openapi.Parameter:
    return openapi.Parameter(
        name=IMAGE_PART,
        in_=openapi.IN_FORM,
        type=openapi.TYPE_FILE,
        required=required,
        description="Image file" if required else "Image file (optional)",
    )


class ProductFormSchema(SwaggerAutoSchema):
    """Documents writes as multipart forms; JSON bodies stay accepted at runtime."""

    def get_consumes(self):
        return [
            parser.media_type
            for parser in self.view.get_parsers()
            if is_form_media_type(parser.media_type)
        ]


class ProductServiceView(APIView):
    """Base view resolving the product service for each request."""

    parser_classes = [MultiPartParser, FormParser, JSONParser]
    swagger_schema = ProductFormSchema

    def get_service(self) -> ProductService:
        return get_product_service()


class ProductListCreateView(ProductServiceView):

    @swagger_auto_schema(
        operation_summary="List products",
        operation_description="Fetch all products available in the store.",
        tags=["Products"],
        responses={200: ProductResponseSerializer(many=True)},
    )
    def get(self, request, *args, **kwargs):
        return Response(self.get_service().get_all_products(), status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Create product",
        operation_description="Add a new product together with its image.",
        tags=["Products"],
        manual_parameters=[*PRODUCT_FORM_PARAMETERS, _image_parameter(required=True)],
        responses={201: ProductResponseSerializer, 400: "Bad request", 500: "Media store failure"},
    )
    def post(self, request, *args, **kwargs):
        data = read_product_data(request)
        image = read_image(request)
        if image is None:
            raise InvalidProductInput(f"Image file is required in the '{IMAGE_PART}' part.")

        service = self.get_service()
        product = service.add_product(data, image)
        return Response(service.mapper.to_response(product), status=status.HTTP_201_CREATED)


class ProductDetailView(ProductServiceView):

    @swagger_auto_schema(
        operation_summary="Retrieve product",
        operation_description="Fetch a product by its id.",
        tags=["Products"],
        responses={200: ProductResponseSerializer, 404: "Product not found"},
    )
    def get(self, request, pk, *args, **kwargs):
        return Response(self.get_service().get_product(pk), status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Update product",
        operation_description=(
            "Overwrite every field of an existing product. "
            "The image is replaced only when a new file is sent."
        ),
        tags=["Products"],
        manual_parameters=[*PRODUCT_FORM_PARAMETERS, _image_parameter(required=False)],
        responses={200: ProductResponseSerializer, 400: "Bad request", 404: "Product not found"},
    )
    def put(self, request, pk, *args, **kwargs):
        data = read_product_data(request)
        image = read_image(request)

        service = self.get_service()
        product = service.update_product(pk, data, image)
        return Response(service.mapper.to_response(product), status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Delete product",
        operation_description="Delete a product and its image.",
        tags=["Products"],
        responses={200: "Product deleted successfully", 404: "Product not found"},
    )
    def delete(self, request, pk, *args, **kwargs):
        self.get_service().delete_product(pk)
        return Response({"message": "Product deleted successfully"}, status=status.HTTP_200_OK)


class ProductSearchView(ProductServiceView):

    @swagger_auto_schema(
        operation_summary="Search products",
        operation_description="Case-insensitive keyword search in name, description and category.",
        tags=["Products"],
        manual_parameters=[
            openapi.Parameter(
                name="keyword",
                in_=openapi.IN_QUERY,
                type=openapi.TYPE_STRING,
                required=True,
                description="Text to look for.",
            )
        ],
        responses={200: ProductResponseSerializer(many=True), 400: "Missing keyword"},
    )
    def get(self, request, *args, **kwargs):
        keyword = (request.query_params.get("keyword") or "").strip()
        if not keyword:
            raise InvalidProductInput("Query parameter 'keyword' is required.")
        return Response(self.get_service().search_products(keyword), status=status.HTTP_200_OK)


class ProductImageView(ProductServiceView):

    @swagger_auto_schema(
        operation_summary="Product image",
        operation_description=(
            "Return the stored image bytes, or redirect to the media host "
            "when images are kept remotely."
        ),
        tags=["Images"],
        responses={200: "Image content", 302: "Redirect to hosted image", 404: "No image"},
    )
    def get(self, request, pk, *args, **kwargs):
        product = self.get_service().get_product_image(pk)

        if product.image_data:
            response = HttpResponse(
                bytes(product.image_data),
                content_type=product.image_type or DEFAULT_IMAGE_TYPE,
            )
            if product.image_name:
                response["Content-Disposition"] = content_disposition_header(False, product.image_name)
            return response

        return HttpResponseRedirect(product.image_url)
