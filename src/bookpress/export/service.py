"""Export orchestration: render artifacts and hand them to storage."""

import logging

from bookpress.config.models import ExportType
from bookpress.export.models import ExportInput, ExportResult, PdfExport
from bookpress.export.storage import ArtifactStore, artifact_key
from bookpress.renderers.html.renderer import HtmlRenderer
from bookpress.renderers.idml.renderer import IdmlRenderer

logger = logging.getLogger(__name__)


def generate_idml_export(export_input: ExportInput, store: ArtifactStore) -> str:
    """Build the IDML package, store it and return its URL."""
    renderer = IdmlRenderer()
    data = renderer.render(export_input)
    key = artifact_key(export_input.project_id, export_input.title, renderer.get_extension())
    return store.put(key, data, renderer.content_type)


def generate_pdf_export(
    export_input: ExportInput,
    store: ArtifactStore,
    include_bleed: bool = True,
    bleed_size: float = 0.125,
) -> PdfExport:
    """Build the print HTML, store it and return its URL.

    The HTML is the print deliverable; turning it into a PDF is left to an
    external paged-media renderer, so ``pdf_url`` stays unset.
    """
    renderer = HtmlRenderer(include_bleed=include_bleed, bleed_size=bleed_size)
    data = renderer.render(export_input)
    key = artifact_key(export_input.project_id, export_input.title, renderer.get_extension())
    return PdfExport(html_url=store.put(key, data, renderer.content_type))


def generate_full_export(
    export_input: ExportInput,
    store: ArtifactStore,
    include_bleed: bool = True,
    bleed_size: float = 0.125,
) -> ExportResult:
    """Produce both artifacts; a failure in one leaves its URL unset."""
    result = ExportResult()

    try:
        result.idml_url = generate_idml_export(export_input, store)
    except Exception:
        logger.exception("IDML generation failed for project %s", export_input.project_id)

    try:
        pdf = generate_pdf_export(export_input, store, include_bleed, bleed_size)
        result.html_url = pdf.html_url
        result.pdf_url = pdf.pdf_url
    except Exception:
        logger.exception("PDF generation failed for project %s", export_input.project_id)

    return result


def generate(
    export_input: ExportInput,
    export_type: ExportType,
    store: ArtifactStore,
    include_bleed: bool = True,
    bleed_size: float = 0.125,
) -> ExportResult:
    """Run the exports requested by ``export_type``.

    Single-format requests propagate their errors; "both" returns whatever
    succeeded.
    """
    if export_type == "both":
        return generate_full_export(export_input, store, include_bleed, bleed_size)
    if export_type == "idml":
        return ExportResult(idml_url=generate_idml_export(export_input, store))
    if export_type == "pdf":
        pdf = generate_pdf_export(export_input, store, include_bleed, bleed_size)
        return ExportResult(html_url=pdf.html_url, pdf_url=pdf.pdf_url)
    raise ValueError(f"Invalid export type: {export_type}. Use 'idml', 'pdf', or 'both'.")
