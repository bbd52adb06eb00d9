# 📄 File: plantscan/modules/plant_identification/application/scan_controller.py
# 🧭 Purpose (Layman Explanation):
# The "brain" of the scan screen. It remembers the chosen photo, asks the
# identification service what plant it is, picks the best match, fetches its care
# guide and decides what the screen shows at every moment.
#
# 🧪 Purpose (Technical Summary):
# View-controller state machine (idle -> capturing -> identifying -> enriching ->
# displaying, plus errored). Owns the image blob and its preview handle, the
# suggestion list and selection, the care/summary pair and the error text. A
# generation counter drops results that arrive after the user moved on.
#
# 🔗 Dependencies:
# - plant_id_client / enrichment_service for remote calls
# - preview_store for revocable preview handles
# - plantscan.shared.i18n for labels and care-value translation
# - plantscan.shared.utils for validation, formatting and structured logging
#
# 🔄 Connected Modules / Calls From:
# - presentation.api.v1.scan (every scan endpoint)
# - presentation.web.page (render for the HTML page)
# - plantscan.main (constructed in lifespan, closed on shutdown)

"""
Scan Controller

Single owner of the scan screen state. Every public operation leaves the
controller in a renderable state; ``render()`` turns it into a localized
``ScanView`` snapshot.

Two tiers of failure:
- Identification path: any error becomes the error panel text and the
  state moves to ``errored``.
- Enrichment path: failures are logged by the enrichment service and
  the care panel simply stays hidden.
"""

from typing import List, Optional

from plantscan.modules.plant_identification.application.dto import (
    CarePanel,
    CareRow,
    ErrorPanel,
    ResultsPanel,
    ScanView,
    SuggestionItem,
    UploadPanel,
)
from plantscan.modules.plant_identification.application.enrichment_service import EnrichmentService
from plantscan.modules.plant_identification.domain.models import (
    BUSY_STATES,
    CareProfile,
    EncyclopediaSummary,
    Geo,
    ScanState,
    Suggestion,
)
from plantscan.modules.plant_identification.infrastructure.external.plant_id_client import PlantIdClient
from plantscan.modules.plant_identification.infrastructure.preview_store import PreviewImage, PreviewStore
from plantscan.shared.config.settings import Settings
from plantscan.shared.core.exceptions import (
    MissingCredentialsError,
    NoImageSelectedError,
    NotFoundError,
    PlantScanException,
    ValidationError,
)
from plantscan.shared.i18n import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    get_labels,
    i18n_care_value,
    is_supported_locale,
    text_direction,
    translate,
)
from plantscan.shared.utils.formatters import format_list, format_range, pretty_prob
from plantscan.shared.utils.logging import get_logger
from plantscan.shared.utils.validators import validate_image_upload

logger = get_logger(__name__)


class ScanController:
    """State machine behind the scan screen."""

    def __init__(
        self,
        plant_id: PlantIdClient,
        enrichment: EnrichmentService,
        preview_store: PreviewStore,
        settings: Settings,
        geo: Optional[Geo] = None,
        locale: str = DEFAULT_LOCALE.value,
    ):
        self.plant_id = plant_id
        self.enrichment = enrichment
        self.preview_store = preview_store
        self.settings = settings
        self.geo = geo
        self.locale = locale if is_supported_locale(locale) else DEFAULT_LOCALE.value

        self.state = ScanState.IDLE
        self.image: Optional[PreviewImage] = None
        self.preview_url: Optional[str] = None
        self.suggestions: List[Suggestion] = []
        self.selected_index: Optional[int] = None
        self.care: Optional[CareProfile] = None
        self.summary: Optional[EncyclopediaSummary] = None
        self.error: Optional[str] = None
        self.no_matches = False
        self.generation = 0

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def capture(self, data: bytes, filename: Optional[str] = None, content_type: Optional[str] = None):
        """
        Hold a new image and publish a preview handle for it.

        Raises:
            InvalidFileTypeError: Empty or unsupported image
            FileTooLargeError: Image exceeds MAX_IMAGE_SIZE
        """
        detected_type = validate_image_upload(
            data,
            filename=filename,
            content_type=content_type,
            max_size=self.settings.MAX_IMAGE_SIZE,
        )

        # results of the previous image, in flight or shown, no longer apply
        self._next_generation()
        self._clear_results()
        self._release_preview()
        self.image = PreviewImage(data=data, content_type=detected_type)
        self.preview_url = self.preview_store.create(data, detected_type)
        self._transition(ScanState.CAPTURING, size=len(data), content_type=detected_type)

    async def identify(self):
        """
        Identify the held image and enrich the best match.

        Prior results are cleared before anything is awaited, so a snapshot
        taken while the request is in flight never shows stale data.
        """
        generation = self._next_generation()
        self._clear_results()
        self._transition(ScanState.IDENTIFYING)

        try:
            self._check_preconditions()
            suggestions = await self.plant_id.identify(self.image.data, self.locale, self.geo)
        except Exception as e:
            if not self._is_current(generation):
                logger.info("Dropping stale identification failure", extra={"generation": generation})
                return
            self.error = e.message if isinstance(e, PlantScanException) else str(e)
            logger.warning(
                "Identification failed",
                extra={"error_type": type(e).__name__, "error": self.error}
            )
            self._transition(ScanState.ERRORED)
            return

        if not self._is_current(generation):
            logger.info("Dropping stale identification result", extra={"generation": generation})
            return

        self.suggestions = suggestions
        if not suggestions:
            self.no_matches = True
            self._transition(ScanState.DISPLAYING, suggestions=0)
            return

        self.selected_index = 0
        await self._enrich_selected(generation)

    async def select_suggestion(self, index: int):
        """Select one suggestion and replace the care guide with its data."""
        if index < 0 or index >= len(self.suggestions):
            raise NotFoundError(
                "Suggestion not found", resource_type="suggestion", resource_id=str(index)
            )

        generation = self._next_generation()
        self.selected_index = index
        await self._enrich_selected(generation)

    def reset(self):
        """Pick another image: drop everything, including the error."""
        self._next_generation()
        self._release_preview()
        self.image = None
        self._clear_results()
        self._transition(ScanState.CAPTURING)

    def set_locale(self, lang: str):
        if not is_supported_locale(lang):
            raise ValidationError(
                f"Unsupported locale: {lang}",
                field="lang",
                value=lang,
                constraint=f"one of {', '.join(SUPPORTED_LOCALES)}",
            )
        self.locale = lang
        logger.info("Locale changed", extra={"lang": lang})

    def set_geo(self, geo: Optional[Geo]):
        self.geo = geo

    def close(self):
        """Release the preview handle on teardown."""
        self._release_preview()
        self.image = None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def loading(self) -> bool:
        return self.state in BUSY_STATES

    @property
    def selected(self) -> Optional[Suggestion]:
        if self.selected_index is None or self.selected_index >= len(self.suggestions):
            return None
        return self.suggestions[self.selected_index]

    def render(self) -> ScanView:
        labels = get_labels(self.locale)
        return ScanView(
            lang=self.locale,
            dir=text_direction(self.locale),
            state=self.state,
            loading=self.loading,
            labels=labels,
            upload=UploadPanel(
                has_image=self.image is not None,
                preview_url=self.preview_url,
                can_identify=self.image is not None and not self.loading,
            ),
            results=self._render_results(),
            care=self._render_care(labels),
            error=ErrorPanel(message=self.error) if self.error else None,
            no_matches=self.no_matches,
        )

    def _render_results(self) -> Optional[ResultsPanel]:
        if not self.suggestions:
            return None
        return ResultsPanel(items=[
            SuggestionItem(
                index=i,
                scientific_name=s.scientific_name,
                probability_percent=pretty_prob(s.probability),
                selected=i == self.selected_index,
                common_names=list(s.details.get("common_names") or []),
            )
            for i, s in enumerate(self.suggestions)
        ])

    def _render_care(self, labels: dict) -> Optional[CarePanel]:
        selected = self.selected
        if selected is None or self.care is None:
            return None

        care = self.care
        rows = []
        if care.pruning_month:
            rows.append(CareRow(key="pruning", label=labels["pruning"], value=format_list(care.pruning_month)))
        hardiness = format_range(care.hardiness)
        if hardiness:
            rows.append(CareRow(key="hardiness", label=labels["hardiness"], value=hardiness))
        if care.pest_susceptibility:
            rows.append(CareRow(key="pests", label=labels["pests"], value=format_list(care.pest_susceptibility)))
        if care.indoor is not None:
            rows.append(CareRow(key="indoor", label=labels["indoor"], value=labels["yes" if care.indoor else "no"]))

        return CarePanel(
            scientific_name=selected.scientific_name,
            watering=i18n_care_value(self.locale, "watering", care.watering),
            sunlight=[i18n_care_value(self.locale, "sunlight", value) for value in care.sunlight],
            rows=rows,
            extract=(self.summary.extract or None) if self.summary else None,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_preconditions(self):
        if not self.settings.has_credentials:
            missing = [
                name for name in ("PLANT_ID_API_KEY", "PERENUAL_API_KEY")
                if not getattr(self.settings, name)
            ]
            raise MissingCredentialsError(translate(self.locale, "errorApiKey"), missing=missing)
        if self.image is None:
            raise NoImageSelectedError(translate(self.locale, "identifyFirst"))

    async def _enrich_selected(self, generation: int):
        suggestion = self.selected
        self._clear_enrichment()
        self._transition(ScanState.ENRICHING, scientific_name=suggestion.scientific_name)

        outcome = await self.enrichment.enrich(suggestion.scientific_name, self.locale)
        if not self._is_current(generation):
            logger.info(
                "Dropping stale enrichment result",
                extra={"scientific_name": suggestion.scientific_name, "generation": generation}
            )
            return

        self.care = outcome.care.value if outcome.care.is_ok else None
        self.summary = outcome.summary.value if outcome.summary.is_ok else None
        self._transition(ScanState.DISPLAYING, suggestions=len(self.suggestions))

    def _clear_results(self):
        self.suggestions = []
        self.selected_index = None
        self._clear_enrichment()
        self.error = None
        self.no_matches = False

    def _clear_enrichment(self):
        # care and summary always belong to the same species
        self.care = None
        self.summary = None

    def _release_preview(self):
        if self.preview_url:
            self.preview_store.revoke(self.preview_url)
        self.preview_url = None

    def _next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def _is_current(self, generation: int) -> bool:
        return generation == self.generation

    def _transition(self, state: ScanState, **extra):
        previous = self.state
        self.state = state
        logger.log_business_event(
            "scan_state_changed",
            f"Scan state {previous.value} -> {state.value}",
            extra={"from": previous.value, "to": state.value, "generation": self.generation, **extra}
        )
