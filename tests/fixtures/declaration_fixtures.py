"""Declaration text fixtures for sdkmodels tests."""

import pytest

OPENAI_DTS = """\
import { LanguageModelV1, EmbeddingModelV1 } from '@ai-sdk/provider';

type OpenAIChatModelId = 'o1' | 'gpt-4o' | 'gpt-4o-mini' | (string & {});
type OpenAICompletionModelId = 'gpt-3.5-turbo-instruct' | (string & {});
type OpenAIEmbeddingModelId = 'text-embedding-3-small' | 'text-embedding-3-large' | 'text-embedding-ada-002' | (string & {});
type OpenAIImageModelId = 'dall-e-3' | 'dall-e-2' | (string & {});
type OpenAITranscriptionModelId = 'whisper-1' | 'gpt-4o-transcribe' | (string & {});
type OpenAISpeechModelId = 'tts-1' | 'tts-1-hd' | (string & {});
type OpenAIResponsesModelId = 'o1' | 'gpt-4o' | (string & {});

declare function createOpenAI(options?: OpenAIProviderSettings): OpenAIProvider;

export { type OpenAIProvider, createOpenAI };
"""

ANTHROPIC_DTS = """\
type AnthropicMessagesModelId = 'claude-3-5-sonnet-latest' | 'claude-3-5-haiku-latest' | (string & {});

interface AnthropicProviderSettings {
    baseURL?: string;
    apiKey?: string;
}
"""

OLLAMA_DTS = """\
type OllamaChatModelId = 'llama3.1'
    | 'mistral'
    | (string & {});
type OllamaEmbeddingModelId = 'nomic-embed-text' | (string & {});
"""

FRIENDLI_DTS = """\
type FriendliAIServerlessModelId = 'meta-llama-3.1-8b-instruct' | (string & {});
"""

FOO_BAR_DTS = "type FooChatModelId = 'a-1' | 'a-2' | (string & {});"


@pytest.fixture
def provider_texts():
    """Declaration texts keyed by provider, in discovery order.

    Totals: 4 providers, 10 model types, 19 models.
    """
    return {
        "anthropic": ANTHROPIC_DTS,
        "openai": OPENAI_DTS,
        "ollama-ai-provider": OLLAMA_DTS,
        "@friendliai/ai-provider": FRIENDLI_DTS,
    }
