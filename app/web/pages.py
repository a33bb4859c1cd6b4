"""
Server-rendered admin pages

Pages call the same services as the JSON API. Submissions follow
post/redirect/get; a failed submission re-renders the form with the error
shown above it.
"""
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import BrandServiceDep, ModelServiceDep, VariantServiceDep
from app.core.config import settings
from app.core.exceptions import BaseAPIException
from app.core.logging import log
from app.web.forms import (
    PROGRAMMING_LABELS,
    brand_from_form,
    car_model_from_form,
    variant_create_from_form,
    variant_form_values,
    variant_update_from_form,
)


templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.globals["api_prefix"] = settings.API_V1_STR
templates.env.globals["programming_labels"] = PROGRAMMING_LABELS

router = APIRouter(default_response_class=HTMLResponse)


def error_text(exc: BaseAPIException) -> str:
    return f"{exc.detail}: {exc.details}" if exc.details else str(exc.detail)


def render(request: Request, template: str, context: Dict[str, Any], status_code: int = status.HTTP_200_OK):
    return templates.TemplateResponse(request, template, context, status_code=status_code)


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/")
async def index():
    return redirect("/brands")


# Brands

@router.get("/brands")
async def brands_page(request: Request, brand_service: BrandServiceDep):
    brands, error = [], None
    try:
        brands = await brand_service.list_brands()
    except BaseAPIException as exc:
        error = error_text(exc)
    return render(request, "brands_list.html", {"brands": brands, "error": error})


@router.get("/brands/new")
async def new_brand_page(request: Request):
    return render(request, "brand_form.html", {"brand": None, "form": {}, "error": None})


@router.post("/brands/new")
async def create_brand_page(request: Request, brand_service: BrandServiceDep):
    form = await request.form()
    try:
        await brand_service.create_brand(brand_from_form(form))
    except BaseAPIException as exc:
        return render(
            request, "brand_form.html", {"brand": None, "form": form, "error": error_text(exc)}, exc.status_code
        )
    return redirect("/brands")


@router.get("/brands/{brand_id}/edit")
async def edit_brand_page(request: Request, brand_id: str, brand_service: BrandServiceDep):
    try:
        brand = await brand_service.get_brand(brand_id)
    except BaseAPIException as exc:
        return render(request, "brands_list.html", {"brands": [], "error": error_text(exc)}, exc.status_code)
    form = {"name": brand.name, "logo_url": brand.logo_url}
    return render(request, "brand_form.html", {"brand": brand, "form": form, "error": None})


@router.post("/brands/{brand_id}/edit")
async def update_brand_page(request: Request, brand_id: str, brand_service: BrandServiceDep):
    form = await request.form()
    try:
        await brand_service.update_brand(brand_id, brand_from_form(form))
    except BaseAPIException as exc:
        brand = {"id": brand_id}
        return render(
            request, "brand_form.html", {"brand": brand, "form": form, "error": error_text(exc)}, exc.status_code
        )
    return redirect("/brands")


@router.post("/brands/{brand_id}/delete")
async def delete_brand_page(request: Request, brand_id: str, brand_service: BrandServiceDep):
    try:
        brand = await brand_service.delete_brand(brand_id)
    except BaseAPIException as exc:
        return render(request, "brands_list.html", {"brands": [], "error": error_text(exc)}, exc.status_code)
    log.info("Brand deleted from admin page", brand_id=brand_id, name=brand.name)
    return redirect("/brands")


# Models

@router.get("/brands/{brand_id}/models")
async def models_page(
    request: Request,
    brand_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep
):
    brand, models, error = None, [], None
    try:
        brand = await brand_service.get_brand(brand_id)
        models = await model_service.list_models(brand_id)
    except BaseAPIException as exc:
        error = error_text(exc)
    return render(request, "models_list.html", {"brand": brand, "brand_id": brand_id, "models": models, "error": error})


@router.get("/brands/{brand_id}/models/new")
async def new_model_page(request: Request, brand_id: str, brand_service: BrandServiceDep):
    brand = await _optional_brand(brand_service, brand_id)
    return render(
        request, "model_form.html", {"brand": brand, "brand_id": brand_id, "model": None, "form": {}, "error": None}
    )


@router.post("/brands/{brand_id}/models/new")
async def create_model_page(
    request: Request,
    brand_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep
):
    form = await request.form()
    try:
        await model_service.create_model(brand_id, car_model_from_form(form))
    except BaseAPIException as exc:
        brand = await _optional_brand(brand_service, brand_id)
        context = {"brand": brand, "brand_id": brand_id, "model": None, "form": form, "error": error_text(exc)}
        return render(request, "model_form.html", context, exc.status_code)
    return redirect(f"/brands/{brand_id}/models")


@router.get("/brands/{brand_id}/models/{model_id}/edit")
async def edit_model_page(
    request: Request,
    brand_id: str,
    model_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep
):
    brand = await _optional_brand(brand_service, brand_id)
    try:
        model = await model_service.get_model(brand_id, model_id)
    except BaseAPIException as exc:
        context = {"brand": brand, "brand_id": brand_id, "models": [], "error": error_text(exc)}
        return render(request, "models_list.html", context, exc.status_code)
    form = {"name": model.name, "image_url": model.image_url, "description": model.description}
    context = {"brand": brand, "brand_id": brand_id, "model": model, "form": form, "error": None}
    return render(request, "model_form.html", context)


@router.post("/brands/{brand_id}/models/{model_id}/edit")
async def update_model_page(
    request: Request,
    brand_id: str,
    model_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep
):
    form = await request.form()
    try:
        await model_service.update_model(brand_id, model_id, car_model_from_form(form))
    except BaseAPIException as exc:
        brand = await _optional_brand(brand_service, brand_id)
        context = {"brand": brand, "brand_id": brand_id, "model": {"id": model_id}, "form": form, "error": error_text(exc)}
        return render(request, "model_form.html", context, exc.status_code)
    return redirect(f"/brands/{brand_id}/models")


@router.post("/brands/{brand_id}/models/{model_id}/delete")
async def delete_model_page(
    request: Request,
    brand_id: str,
    model_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep
):
    try:
        await model_service.delete_model(brand_id, model_id)
    except BaseAPIException as exc:
        brand = await _optional_brand(brand_service, brand_id)
        context = {"brand": brand, "brand_id": brand_id, "models": [], "error": error_text(exc)}
        return render(request, "models_list.html", context, exc.status_code)
    return redirect(f"/brands/{brand_id}/models")


# Variants

@router.get("/brands/{brand_id}/models/{model_id}/variants")
async def variants_page(
    request: Request,
    brand_id: str,
    model_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep,
    variant_service: VariantServiceDep
):
    context: Dict[str, Any] = {"brand_id": brand_id, "model_id": model_id, "brand": None, "model": None}
    variants, error = [], None
    try:
        context["brand"] = await brand_service.get_brand(brand_id)
        context["model"] = await model_service.get_model(brand_id, model_id)
        variants = await variant_service.list_variants(brand_id, model_id)
    except BaseAPIException as exc:
        error = error_text(exc)
    return render(request, "variants_list.html", {**context, "variants": variants, "error": error})


@router.get("/brands/{brand_id}/models/{model_id}/variants/new")
async def new_variant_page(
    request: Request,
    brand_id: str,
    model_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep
):
    context = await _variant_context(brand_service, model_service, brand_id, model_id)
    return render(request, "variant_form.html", {**context, "variant": None, "form": {}, "error": None})


@router.post("/brands/{brand_id}/models/{model_id}/variants/new")
async def create_variant_page(
    request: Request,
    brand_id: str,
    model_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep,
    variant_service: VariantServiceDep
):
    form = await request.form()
    try:
        await variant_service.create_variant(brand_id, model_id, variant_create_from_form(form))
    except BaseAPIException as exc:
        context = await _variant_context(brand_service, model_service, brand_id, model_id)
        context.update({"variant": None, "form": form, "error": error_text(exc)})
        return render(request, "variant_form.html", context, exc.status_code)
    return redirect(f"/brands/{brand_id}/models/{model_id}/variants")


@router.get("/brands/{brand_id}/models/{model_id}/variants/{variant_id}/edit")
async def edit_variant_page(
    request: Request,
    brand_id: str,
    model_id: str,
    variant_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep,
    variant_service: VariantServiceDep
):
    context = await _variant_context(brand_service, model_service, brand_id, model_id, with_siblings=True)
    try:
        variant = await variant_service.get_variant(brand_id, model_id, variant_id)
    except BaseAPIException as exc:
        context.update({"variants": [], "error": error_text(exc)})
        return render(request, "variants_list.html", context, exc.status_code)
    context.update({"variant": variant, "form": variant_form_values(variant), "error": None})
    return render(request, "variant_form.html", context)


@router.post("/brands/{brand_id}/models/{model_id}/variants/{variant_id}/edit")
async def update_variant_page(
    request: Request,
    brand_id: str,
    model_id: str,
    variant_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep,
    variant_service: VariantServiceDep
):
    form = await request.form()
    try:
        variant = await variant_service.update_variant(brand_id, model_id, variant_id, variant_update_from_form(form))
    except BaseAPIException as exc:
        context = await _variant_context(brand_service, model_service, brand_id, model_id, with_siblings=True)
        context.update({"variant": {"id": variant_id}, "form": form, "error": error_text(exc)})
        return render(request, "variant_form.html", context, exc.status_code)
    # A moved variant is listed under its new model
    return redirect(f"/brands/{brand_id}/models/{variant.model_id}/variants")


@router.post("/brands/{brand_id}/models/{model_id}/variants/{variant_id}/delete")
async def delete_variant_page(
    request: Request,
    brand_id: str,
    model_id: str,
    variant_id: str,
    brand_service: BrandServiceDep,
    model_service: ModelServiceDep,
    variant_service: VariantServiceDep
):
    try:
        await variant_service.delete_variant(brand_id, model_id, variant_id)
    except BaseAPIException as exc:
        context = await _variant_context(brand_service, model_service, brand_id, model_id)
        context.update({"variants": [], "error": error_text(exc)})
        return render(request, "variants_list.html", context, exc.status_code)
    return redirect(f"/brands/{brand_id}/models/{model_id}/variants")


async def _optional_brand(brand_service, brand_id: str) -> Optional[Any]:
    """Brand shown in page headers; a missing brand only hides the breadcrumb"""
    try:
        return await brand_service.get_brand(brand_id)
    except BaseAPIException as exc:
        log.debug("Brand header unavailable", brand_id=brand_id, error=exc.detail)
        return None


async def _variant_context(
    brand_service,
    model_service,
    brand_id: str,
    model_id: str,
    with_siblings: bool = False
) -> Dict[str, Any]:
    context: Dict[str, Any] = {
        "brand_id": brand_id,
        "model_id": model_id,
        "brand": await _optional_brand(brand_service, brand_id),
        "model": None,
        "sibling_models": [],
    }
    try:
        context["model"] = await model_service.get_model(brand_id, model_id)
        if with_siblings:
            context["sibling_models"] = await model_service.list_models(brand_id)
    except BaseAPIException as exc:
        log.debug("Model header unavailable", model_id=model_id, error=exc.detail)
    return context
