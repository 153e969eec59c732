"""Constants for the sdkmodels application."""

# Config file
CONFIG_FILENAME = ".sdkmodels.json"

# --- Categories ---
DEFAULT_CATEGORY = "chat"

# Keyword search order; the first keyword contained in an alias name wins.
CATEGORY_PRIORITY = (
    "embedding",
    "image",
    "completion",
    "transcription",
    "speech",
    "responses",
)

CATEGORIES = (DEFAULT_CATEGORY,) + CATEGORY_PRIORITY

# --- Alias naming conventions ---
ALIAS_SUFFIXES = (
    "ModelId",
    "Model",
    "Models",
    "ChatModel",
    "EmbeddingModel",
    "ImageModel",
)

DEFAULT_EXCLUDED_ALIASES = ("OpenAIResponsesModelId",)

# --- Discovery ---
NODE_MODULES_DIR = "node_modules"
OFFICIAL_SCOPES = ("@ai-sdk",)
OFFICIAL_TYPE_FILE = "dist/index.d.ts"

TYPE_FILE_CANDIDATES = (
    "dist/index.d.ts",
    "lib/index.d.ts",
    "index.d.ts",
    "dist/types.d.ts",
    "types.d.ts",
)

COMMUNITY_PROVIDERS = (
    "ollama-ai-provider",
    "chrome-ai",
    "@friendliai/ai-provider",
    "@portkey-ai/vercel-provider",
    "workers-ai-provider",
    "@openrouter/ai-sdk-provider",
    "@requesty/ai-sdk",
    "@crosshatch/ai-provider",
    "mixedbread-ai-provider",
    "voyage-ai-provider",
    "@mem0/vercel-ai-provider",
    "@letta-ai/vercel-ai-sdk-provider",
    "spark-ai-provider",
    "anthropic-vertex-ai",
    "@langdb/vercel-provider",
    "dify-ai-provider",
    "sarvam-ai-provider",
)

# --- Output ---
DEFAULT_OUTPUT_FILE = "ai-models.ts"
OUTPUT_FORMATS = ("typescript", "json")
COLLISION_POLICIES = ("error", "warn")

# Environment fallbacks for the CLI
ENV_PROJECT_ROOT = "SDKMODELS_PROJECT_ROOT"
ENV_OUTPUT_FILE = "SDKMODELS_OUTPUT"

# Logging
LOG_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"
