# This project was developed with assistance from AI tools.
from pathlib import Path
from typing import Literal

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import RunnableConfig

from .base import BaseAgent
from config import config as app_config
from models import PipelineState, WorkflowError
from prompts import EXTRACTION_PROMPTS, EXTRACTION_USER_PROMPT
from utils.extraction_cache import ExtractionCache, get_extraction_cache
from utils.llm_json import parse_json_object
from utils.pdf import NoTextError, extract_text_from_pdf

DocType = Literal["contract", "registry"]

STATE_PATH_KEYS: dict[DocType, str] = {"contract": "contract_path", "registry": "registry_path"}
STATE_DATA_KEYS: dict[DocType, str] = {"contract": "contract_data", "registry": "registry_data"}


class DisclosureExtractorAgent(BaseAgent):
    """
    Reads one uploaded PDF (lease contract or registry extract) and returns the
    record-shaped JSON object the model produced for it.

    A reply without a usable JSON object degrades to ``{}``; the record is then
    built from defaults and the other document.
    """

    def __init__(
        self,
        doc_type: DocType,
        llm: BaseChatModel | None = None,
        cache: ExtractionCache | None = None,
    ):
        label = "Contract Extractor" if doc_type == "contract" else "Registry Extractor"
        super().__init__(name=label, llm=llm)
        self.doc_type = doc_type
        self._cache = cache

        self.extraction_prompt = ChatPromptTemplate.from_messages([
            ("system", EXTRACTION_PROMPTS[doc_type]),
            ("human", EXTRACTION_USER_PROMPT),
        ])

    @property
    def cache(self) -> ExtractionCache:
        if self._cache is None:
            self._cache = get_extraction_cache()
        return self._cache

    @property
    def extraction_chain(self):
        return self.extraction_prompt | self.llm | StrOutputParser()

    def analyze_content(self, filename: str, text: str, config: RunnableConfig | None = None) -> dict:
        """Send the document text to the model and parse the first JSON object of its reply."""
        max_chars = app_config.EXTRACTION_MAX_CHARS
        truncated_text = text[:max_chars] + "..." if len(text) > max_chars else text

        reply = self.extraction_chain.invoke(
            {"filename": filename, "text": truncated_text},
            config=config,
        )
        return parse_json_object(reply)

    def extract(self, pdf_path: Path | str, config: RunnableConfig | None = None, use_cache: bool = True) -> dict:
        """
        Extract one document.

        Raises:
            FileNotFoundError / RuntimeError: when the PDF cannot be read
            NoTextError: when neither the text layer nor OCR yields any text
        """
        pdf_path = Path(pdf_path)
        content_hash = ExtractionCache.compute_hash(pdf_path)

        if use_cache:
            cached = self.cache.get(content_hash, self.doc_type)
            if cached is not None:
                self.log(f"  [CACHE HIT] {pdf_path.name}")
                return cached

        result = extract_text_from_pdf(pdf_path)
        if result.is_empty:
            raise NoTextError(
                f"No text layer in {pdf_path.name} and OCR recovered no text from its {result.page_count} pages"
            )
        if result.ocr_used:
            self.log(f"  OCR filled pages {result.ocr_pages} (confidence {result.ocr_confidence:.2f})")

        data = self.analyze_content(pdf_path.name, result.text, config)
        self.log(f"  Extracted {len(data)} top-level fields from {result.page_count} pages")

        # Empty replies are not cached so a retry can do better
        if use_cache and data:
            self.cache.store(content_hash, self.doc_type, pdf_path.name, data)
        return data

    def run(self, state: PipelineState, config: RunnableConfig) -> dict:
        """Extract the document named in state for this agent's document type."""
        data_key = STATE_DATA_KEYS[self.doc_type]
        path = state.get(STATE_PATH_KEYS[self.doc_type])
        if not path:
            return {data_key: {}}

        self.log(f"Processing: {Path(path).name}")
        try:
            data = self.extract(path, config, use_cache=state.get("use_cache", True))
        except NoTextError as e:
            self.log(f"  [WARNING] {e}")
            return {
                data_key: {},
                "workflow_errors": [WorkflowError(
                    code="NO_TEXT_LAYER",
                    message=str(e),
                    severity="warning",
                    recoverable=False,
                    node=f"extract_{self.doc_type}",
                    document=Path(path).name,
                )],
                "messages": [f"No readable text in {Path(path).name}"],
            }
        except (FileNotFoundError, RuntimeError) as e:
            self.log(f"  [ERROR] {e}")
            return {
                data_key: {},
                "workflow_errors": [WorkflowError(
                    code="PDF_EXTRACTION_FAILED",
                    message=str(e),
                    severity="warning",
                    recoverable=False,
                    node=f"extract_{self.doc_type}",
                    document=Path(path).name,
                )],
                "messages": [f"Could not read {Path(path).name}"],
            }

        if not data:
            return {
                data_key: {},
                "workflow_errors": [WorkflowError(
                    code="EXTRACTION_EMPTY",
                    message="Model reply contained no usable JSON object",
                    severity="warning",
                    recoverable=True,
                    node=f"extract_{self.doc_type}",
                    document=Path(path).name,
                )],
                "messages": [f"No data extracted from {Path(path).name}"],
            }

        return {
            data_key: data,
            "messages": [f"Extracted {self.doc_type} data from {Path(path).name}"],
        }
