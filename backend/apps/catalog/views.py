from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import paginated_response, ErrorResponseSerializer
from apps.common import get_logger
from .container import build_product_service, build_category_service
from .pagination import paginated_payload
from .serializers import (
    CategorySerializer,
    PageQuerySerializer,
    ProductSerializer,
    ProductWriteSerializer,
    RequiredPageQuerySerializer,
    SearchQuerySerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")

NAME_PARAM = OpenApiParameter(
    name="name",
    description="Case-insensitive substring of the name",
    required=False,
    type=str,
)
PAGE_PARAM = OpenApiParameter(
    name="page", description="Zero-based page index (default 0)", required=False, type=int
)
SIZE_PARAM = OpenApiParameter(
    name="size", description="Page length (default 10)", required=False, type=int
)
ERROR_400 = OpenApiResponse(response=ErrorResponseSerializer)
ERROR_404 = OpenApiResponse(response=ErrorResponseSerializer)


def _parse_query(serializer_class, request):
    query = serializer_class(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data


@extend_schema(tags=["Categories"])
class CategoryListView(APIView):
    service = build_category_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        operation_id="categories_list",
        summary="List categories",
        description="Both page and size are mandatory on this route. An empty page is reported as 404.",
        parameters=[
            NAME_PARAM,
            OpenApiParameter("page", int, required=True, description="Zero-based page index"),
            OpenApiParameter("size", int, required=True, description="Page length"),
        ],
        responses={
            200: paginated_response(CategorySerializer),
            400: ERROR_400,
            404: ERROR_404,
        },
    )
    def get(self, request):
        query = _parse_query(RequiredPageQuerySerializer, request)
        self.log.debug("Handling category list request", **query)
        page = self.service.list_categories(
            query.get("name"), query["page"], query["size"]
        )
        return Response(paginated_payload(page, CategorySerializer, request))


@extend_schema(tags=["Categories"])
class CategoryCreateView(APIView):
    service = build_category_service()
    log = logger.bind(view="CategoryCreateView")

    @extend_schema(
        operation_id="categories_create",
        summary="Create category",
        request=CategorySerializer,
        responses={201: CategorySerializer, 400: ERROR_400},
    )
    def post(self, request):
        serializer = CategorySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = self.service.create_category(serializer.validated_data)
        self.log.info("Category created via API", category_id=dto.id)
        return Response(CategorySerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Categories"])
class CategoryDetailView(APIView):
    service = build_category_service()
    log = logger.bind(view="CategoryDetailView")

    @extend_schema(
        operation_id="categories_retrieve",
        summary="Get category",
        parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
        responses={200: CategorySerializer, 400: ERROR_400, 404: ERROR_404},
    )
    def get(self, request, category_id: int):
        self.log.debug("Fetching category detail", category_id=category_id)
        dto = self.service.get_category(category_id)
        return Response(CategorySerializer(dto).data)

    @extend_schema(
        operation_id="categories_update",
        summary="Replace category",
        request=CategorySerializer,
        responses={200: CategorySerializer, 400: ERROR_400, 404: ERROR_404},
    )
    def put(self, request, category_id: int):
        serializer = CategorySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Replacing category", category_id=category_id)
        dto = self.service.update_category(category_id, serializer.validated_data)
        return Response(CategorySerializer(dto).data)

    @extend_schema(
        operation_id="categories_destroy",
        summary="Delete category",
        description="Products of the deleted category are kept with a null categoryId.",
        responses={204: None, 400: ERROR_400, 404: ERROR_404},
    )
    def delete(self, request, category_id: int):
        self.log.info("Deleting category", category_id=category_id)
        self.service.delete_category(category_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Categories", "Products"])
class CategoryProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="CategoryProductListView")

    @extend_schema(
        operation_id="categories_products_list",
        summary="List products of a category",
        parameters=[
            OpenApiParameter("category_id", int, OpenApiParameter.PATH),
            PAGE_PARAM,
            SIZE_PARAM,
        ],
        responses={
            200: paginated_response(ProductSerializer),
            400: ERROR_400,
            404: ERROR_404,
        },
    )
    def get(self, request, category_id: int):
        query = _parse_query(PageQuerySerializer, request)
        self.log.debug(
            "Handling category product list request",
            category_id=category_id,
            page=query["page"],
            size=query["size"],
        )
        page = self.service.list_products_by_category(
            category_id, query["page"], query["size"]
        )
        return Response(paginated_payload(page, ProductSerializer, request))


@extend_schema(tags=["Products"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="Optional name filter; page defaults to 0 and size to 10. An empty page is reported as 404.",
        parameters=[NAME_PARAM, PAGE_PARAM, SIZE_PARAM],
        responses={
            200: paginated_response(ProductSerializer),
            400: ERROR_400,
            404: ERROR_404,
        },
    )
    def get(self, request):
        query = _parse_query(PageQuerySerializer, request)
        self.log.debug("Handling product list request", **query)
        page = self.service.list_products(
            query.get("name"), query["page"], query["size"]
        )
        return Response(paginated_payload(page, ProductSerializer, request))


@extend_schema(tags=["Products"])
class ProductSearchView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductSearchView")

    @extend_schema(
        operation_id="products_search",
        summary="Search products by name",
        parameters=[
            OpenApiParameter(
                "name", str, required=True, description="Case-insensitive substring of the name"
            ),
            PAGE_PARAM,
            SIZE_PARAM,
        ],
        responses={
            200: paginated_response(ProductSerializer),
            400: ERROR_400,
            404: ERROR_404,
        },
    )
    def get(self, request):
        query = _parse_query(SearchQuerySerializer, request)
        self.log.debug("Handling product search request", **query)
        page = self.service.search_products(query["name"], query["page"], query["size"])
        return Response(paginated_payload(page, ProductSerializer, request))


@extend_schema(tags=["Products"])
class ProductCreateView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductCreateView")

    @extend_schema(
        operation_id="products_create",
        summary="Create product",
        request=ProductWriteSerializer,
        responses={201: ProductSerializer, 400: ERROR_400, 404: ERROR_404},
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Creating product via API",
            name=serializer.validated_data.get("name"),
            category_id=serializer.validated_data.get("category_id"),
        )
        dto = self.service.create_product(serializer.validated_data)
        self.log.info("Product created via API", product_id=dto.id)
        return Response(ProductSerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Products"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={200: ProductSerializer, 400: ERROR_400, 404: ERROR_404},
    )
    def get(self, request, product_id: int):
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        return Response(ProductSerializer(dto).data)

    @extend_schema(
        operation_id="products_update",
        summary="Replace product",
        description="Overwrites name, price, stock and category; omitted fields are cleared.",
        request=ProductWriteSerializer,
        responses={200: ProductSerializer, 400: ERROR_400, 404: ERROR_404},
    )
    def put(self, request, product_id: int):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Replacing product", product_id=product_id)
        dto = self.service.update_product(product_id, serializer.validated_data)
        return Response(ProductSerializer(dto).data)

    @extend_schema(
        operation_id="products_destroy",
        summary="Delete product",
        responses={204: None, 400: ERROR_400, 404: ERROR_404},
    )
    def delete(self, request, product_id: int):
        self.log.info("Deleting product", product_id=product_id)
        self.service.delete_product(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
