# planwright/config/schema.py
"""
Pydantic configuration models for planwright.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DeepSeekConfig(BaseModel):
    """DeepSeek (OpenAI-compatible chat completions) configuration."""

    model_config = ConfigDict(extra="ignore")

    base_url: str = Field(
        default="https://api.deepseek.com", description="Chat completions API base URL"
    )
    model: str = Field(default="deepseek-chat", description="Model to use")
    api_key: str | None = Field(
        default=None,
        description="API key (None = read DEEPSEEK_API_KEY from the environment)",
    )
    timeout: int = Field(default=120, ge=1, description="HTTP timeout in seconds")


class OllamaConfig(BaseModel):
    """Ollama server configuration."""

    model_config = ConfigDict(extra="ignore")

    base_url: str = Field(
        default="http://localhost:11434", description="Ollama API base URL"
    )
    model: str = Field(
        default="qwen2.5-coder:32b-instruct",
        description="Ollama model to use for planning and chat",
    )
    timeout: int = Field(
        default=300, ge=1, description="Request timeout in seconds (generous for model loading)"
    )


class SearchConfig(BaseModel):
    """Web search (DuckDuckGo HTML endpoint) configuration."""

    model_config = ConfigDict(extra="ignore")

    endpoint: str = Field(
        default="https://html.duckduckgo.com/html/", description="Search results page URL"
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
        ),
        description="User-Agent header sent with search and page requests",
    )
    max_results: int = Field(
        default=5, ge=1, le=20, description="Results kept per query (highest ranked first)"
    )
    fetch_page_content: bool = Field(
        default=False, description="Fetch each result page and append its text to the snippet"
    )
    page_content_chars: int = Field(
        default=2000, ge=0, description="Maximum characters of page text kept per result"
    )
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")


class PlanningConfig(BaseModel):
    """Limits applied to every planning request."""

    model_config = ConfigDict(extra="ignore")

    max_searches: int = Field(
        default=20, ge=0, description="Search ceiling per create_plan request"
    )
    per_call_timeout: float = Field(
        default=120.0, gt=0, description="Timeout (seconds) for each search or completion call"
    )
    max_queries_per_phase: int = Field(
        default=4, ge=0, le=10, description="Candidate search queries per phase"
    )
    max_evidence_chars: int = Field(
        default=12000, ge=0, description="Evidence size bound per phase prompt"
    )


class ServerConfig(BaseModel):
    """HTTP API bind address."""

    model_config = ConfigDict(extra="ignore")

    host: str = Field(default="127.0.0.1", description="Bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")


class OutputConfig(BaseModel):
    """Output configuration."""

    model_config = ConfigDict(extra="ignore")

    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Logging verbosity level"
    )


class PlannerConfig(BaseModel):
    """Root configuration for planwright."""

    model_config = ConfigDict(extra="ignore")

    provider: Literal["deepseek", "ollama"] = Field(
        default="deepseek", description="LLM provider to use"
    )
    deepseek: DeepSeekConfig = Field(default_factory=DeepSeekConfig)
    ollama: OllamaConfig = Field(default_factory=OllamaConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    planning: PlanningConfig = Field(default_factory=PlanningConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def active_model(self) -> str:
        """Model name of the configured provider."""
        return self.deepseek.model if self.provider == "deepseek" else self.ollama.model
