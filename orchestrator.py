# This project was developed with assistance from AI tools.
"""
LangGraph-based orchestrator for the disclosure workflow.

Manages the pipeline: extraction (contract and registry in parallel) ->
record building -> hazard lookup -> rendering of the disclosure and the
hazard-map document.
"""
from pathlib import Path
from typing import Any, Literal

import openai
from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, START, StateGraph
from langgraph.types import RetryPolicy
from pydantic import ValidationError

from agents import DisclosureExtractorAgent
from config import config as app_config
from models import DisclosureRecord, PipelineState, WorkflowError
from presets import AgencyPreset, apply_preset, load_agency_preset
from rendering import AssetSources, RenderError, render_disclosure, render_hazard_document
from utils.geocoding import lookup_hazards
from utils.record_merge import build_record, resolve_path, set_field

DISCLOSURE_FILENAME = "重要事項説明書.pdf"
HAZARD_FILENAME = "hazard-map.pdf"


# Define retry policy for LLM-calling nodes
LLM_RETRY_POLICY = RetryPolicy(
    initial_interval=app_config.LLM_RETRY_DELAY,
    backoff_factor=2.0,
    max_interval=30.0,
    max_attempts=app_config.LLM_MAX_RETRIES,
    jitter=True,
    retry_on=(
        TimeoutError,
        ConnectionError,
        openai.APIConnectionError,
        openai.APITimeoutError,
        openai.RateLimitError,
        openai.InternalServerError,
    ),
)


def asset_sources() -> AssetSources:
    """Rendering asset locations from configuration."""
    return AssetSources(
        font_name=app_config.FONT_NAME,
        font_path=app_config.FONT_PATH or None,
        font_urls=app_config.FONT_URLS,
        template_path=app_config.TEMPLATE_PATH or None,
        template_urls=app_config.TEMPLATE_URLS,
        timeout=app_config.ASSET_TIMEOUT,
    )


def write_pdf(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


class WorkflowOrchestrator:
    """
    LangGraph-based orchestrator for the disclosure workflow.

    The workflow follows this sequence:
    1. extract_contract / extract_registry - LLM extraction of each uploaded PDF
    2. build_record - defaults <- contract <- registry <- agency preset <- manual edits
    3. lookup_hazards - geocode the property address (skipped without an address)
    4. render_documents - disclosure PDF and, optionally, the hazard-map PDF
    """

    def __init__(
        self,
        preset: AgencyPreset | None = None,
        llm: BaseChatModel | None = None,
        sources: AssetSources | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            preset: Agency preset applied after extraction
            llm: Chat model shared by both extractors (defaults to ChatOpenAI)
            sources: Font and template locations (defaults to configuration)
        """
        self.contract_extractor = DisclosureExtractorAgent("contract", llm=llm)
        self.registry_extractor = DisclosureExtractorAgent("registry", llm=llm)
        self.preset = preset
        self.sources = sources or asset_sources()
        self.graph = self._build_graph()
        self.compiled_graph = self.graph.compile()

    def _build_graph(self) -> StateGraph:
        """Build the LangGraph workflow graph."""
        workflow = StateGraph(PipelineState)

        workflow.add_node(
            "extract_contract",
            self.contract_extractor.run,
            retry_policy=LLM_RETRY_POLICY,
            metadata={"agent": "contract_extractor", "has_llm": True}
        )
        workflow.add_node(
            "extract_registry",
            self.registry_extractor.run,
            retry_policy=LLM_RETRY_POLICY,
            metadata={"agent": "registry_extractor", "has_llm": True}
        )
        workflow.add_node(
            "build_record",
            self.build_record,
            metadata={"agent": "record_builder", "has_llm": False}
        )
        workflow.add_node(
            "lookup_hazards",
            self.lookup_hazards,
            metadata={"agent": "hazard_lookup", "has_llm": False}
        )
        workflow.add_node(
            "render_documents",
            self.render_documents,
            metadata={"agent": "renderer", "has_llm": False}
        )

        workflow.add_edge(START, "extract_contract")
        workflow.add_edge(START, "extract_registry")
        workflow.add_edge(["extract_contract", "extract_registry"], "build_record")
        workflow.add_conditional_edges(
            "build_record",
            self._should_lookup_hazards,
            {
                "lookup": "lookup_hazards",
                "skip": "render_documents"
            }
        )
        workflow.add_edge("lookup_hazards", "render_documents")
        workflow.add_edge("render_documents", END)

        return workflow

    def _should_lookup_hazards(self, state: PipelineState) -> Literal["lookup", "skip"]:
        """Conditional edge: geocode only when a hazard document is wanted and an address is known."""
        record = state.get("record")
        if state.get("render_hazard", True) and record is not None and record.property_address:
            return "lookup"
        return "skip"

    # =========================================================================
    # Nodes
    # =========================================================================

    def build_record(self, state: PipelineState, config: RunnableConfig | None = None) -> dict:
        print("\n" + "=" * 60)
        print("STEP 2: Record Building")
        print("=" * 60)

        record = build_record(state.get("contract_data"), state.get("registry_data"))
        record = apply_preset(record, self.preset)

        errors: list[WorkflowError] = []
        for path, value in (state.get("edits") or {}).items():
            try:
                record = set_field(record, resolve_path(path), value)
            except (ValueError, ValidationError) as e:
                print(f"  [WARNING] Edit {path} ignored: {e}")
                errors.append(WorkflowError(
                    code="INVALID_EDIT",
                    message=f"Edit {path}={value!r} ignored: {e}",
                    severity="error",
                    recoverable=True,
                    node="build_record",
                ))

        print(f"  Property: {record.building.name or '(no name)'} / {record.property_address or '(no address)'}")
        return {
            "record": record,
            "workflow_errors": errors,
            "messages": [f"Built record with {len(state.get('edits') or {})} manual edits"],
        }

    def lookup_hazards(self, state: PipelineState, config: RunnableConfig | None = None) -> dict:
        print("\n" + "=" * 60)
        print("STEP 3: Hazard Lookup")
        print("=" * 60)

        record: DisclosureRecord = state["record"]
        report = lookup_hazards(record.property_address)
        # Images supplied with the record are kept
        merged = record.hazard_report.model_copy(update={
            "address": report.address,
            "latitude": report.latitude,
            "longitude": report.longitude,
            "flood_risk": report.flood_risk,
            "landslide_risk": report.landslide_risk,
            "tsunami_risk": report.tsunami_risk,
        })
        print(f"  {merged.flood_risk}")
        return {
            "record": record.model_copy(update={"hazard_report": merged}),
            "messages": [f"Hazard lookup for {record.property_address}"],
        }

    def render_documents(self, state: PipelineState, config: RunnableConfig | None = None) -> dict:
        print("\n" + "=" * 60)
        print("STEP 4: Rendering")
        print("=" * 60)

        record: DisclosureRecord = state["record"]
        output_dir = Path(state.get("output_dir") or app_config.OUTPUT_DIR)
        result: dict[str, Any] = {"render_succeeded": False}

        try:
            disclosure = render_disclosure(
                record, self.sources, version=app_config.TEMPLATE_VERSION, mark_style=app_config.MARK_STYLE
            )
            hazard = None
            if state.get("render_hazard", True):
                hazard_report = record.hazard_report.model_copy(
                    update={"address": record.hazard_report.address or record.property_address}
                )
                hazard = render_hazard_document(hazard_report, self.sources)
        except RenderError as e:
            print(f"  [ERROR] {e}")
            result["workflow_errors"] = [WorkflowError(
                code="RENDER_FAILED",
                message=str(e),
                severity="critical",
                recoverable=False,
                node="render_documents",
                details={"error_type": type(e).__name__},
            )]
            result["messages"] = ["Rendering failed; no files written"]
            return result

        # Files are written only once every document rendered
        result["disclosure_path"] = str(write_pdf(output_dir / DISCLOSURE_FILENAME, disclosure))
        print(f"  Disclosure: {result['disclosure_path']}")
        if hazard is not None:
            result["hazard_path"] = str(write_pdf(output_dir / HAZARD_FILENAME, hazard))
            print(f"  Hazard map: {result['hazard_path']}")
        result["render_succeeded"] = True
        result["messages"] = ["Rendered documents"]
        return result

    # =========================================================================
    # Entry point
    # =========================================================================

    def run(
        self,
        contract_path: str | None,
        registry_path: str | None,
        output_dir: str | None = None,
        edits: dict[str, Any] | None = None,
        use_cache: bool = True,
        render_hazard: bool = True,
    ) -> PipelineState:
        """
        Execute the full workflow.

        Args:
            contract_path: Lease contract PDF (optional)
            registry_path: Registry extract PDF (optional)
            output_dir: Directory for the rendered PDFs
            edits: Manual dotted-path edits applied last
            use_cache: Whether to use the extraction cache
            render_hazard: Also look up hazards and render the hazard-map document

        Returns:
            Final workflow state
        """
        print("\n" + "=" * 60)
        print("STEP 1: Document Extraction")
        print("=" * 60)
        print(f"LLM URL: {app_config.OPENAI_BASE_URL}")
        print(f"LLM MODEL: {app_config.OPENAI_MODEL}")

        initial_state: PipelineState = {
            "contract_path": contract_path or "",
            "registry_path": registry_path or "",
            "output_dir": output_dir or str(app_config.OUTPUT_DIR),
            "edits": edits or {},
            "use_cache": use_cache,
            "render_hazard": render_hazard,
            "contract_data": {},
            "registry_data": {},
            "render_succeeded": False,
            "workflow_errors": [],
            "messages": [],
        }

        try:
            result = self.compiled_graph.invoke(initial_state)
        except Exception as e:
            print(f"\n[ERROR] Workflow failed: {e}")
            raise

        self._print_summary(result)
        return result

    def _print_summary(self, state: PipelineState) -> None:
        """Print a summary of the workflow execution."""
        print("\n" + "=" * 60)
        print("WORKFLOW SUMMARY")
        print("=" * 60)

        print(f"Contract fields:  {len(state.get('contract_data') or {})}")
        print(f"Registry fields:  {len(state.get('registry_data') or {})}")

        if state.get("render_succeeded"):
            print(f"\nDisclosure: {state.get('disclosure_path')}")
            if state.get("hazard_path"):
                print(f"Hazard map: {state.get('hazard_path')}")
        else:
            print("\n[WARNING] No documents were rendered")

        all_errors = state.get("workflow_errors", [])
        if all_errors:
            critical = [e for e in all_errors if e.severity == "critical"]
            errors = [e for e in all_errors if e.severity == "error"]
            warnings = [e for e in all_errors if e.severity == "warning"]

            print(f"\nErrors Summary: {len(critical)} critical, {len(errors)} errors, {len(warnings)} warnings")
            for error in critical + errors + warnings:
                doc_info = f" ({error.document})" if error.document else ""
                print(f"  [{error.severity.upper()}] {error.code}{doc_info}: {error.message}")

        print("=" * 60)


def create_orchestrator(llm: BaseChatModel | None = None) -> WorkflowOrchestrator:
    """
    Factory function to create a workflow orchestrator with the configured agency preset.

    Returns:
        Configured WorkflowOrchestrator instance
    """
    return WorkflowOrchestrator(preset=load_agency_preset(app_config.AGENCY_PRESET_PATH), llm=llm)
