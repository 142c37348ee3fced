"""Unit tests for SchemaGenerator (model-backed inference with structural fallback)."""

import json
from datetime import date, datetime
from decimal import Decimal

from template_generator.application.services.schema_generator import (
    SYSTEM_PROMPT,
    SchemaGenerator,
    build_fallback_schema,
    build_user_prompt,
)
from template_generator.infrastructure.exceptions import TextGenerationException


class FakeTextGenerator:
    """ITextGenerator returning a canned reply (or raising) and recording calls."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, system_prompt, user_prompt, temperature, max_output_tokens) -> str:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "temperature": temperature,
                "max_output_tokens": max_output_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


class TestFallbackSchema:
    def test_mixed_row(self) -> None:
        schema = build_fallback_schema([{"Age": 30, "Name": "Bob", "Tags": ["a"]}])
        assert schema == {
            "type": "object",
            "properties": {
                "Age": {"type": "number", "title": "Age"},
                "Name": {"type": "string", "title": "Name"},
                "Tags": {"type": "array", "items": {"type": "string"}, "title": "Tags"},
            },
        }

    def test_dates_bools_and_nulls(self) -> None:
        schema = build_fallback_schema(
            [{"When": datetime(2024, 1, 2, 3, 4), "Day": date(2024, 1, 2), "Flag": True, "Empty": None}]
        )
        props = schema["properties"]
        assert props["When"] == {"type": "string", "format": "date", "title": "When"}
        assert props["Day"] == {"type": "string", "format": "date", "title": "Day"}
        assert props["Flag"] == {"type": "string", "title": "Flag"}
        assert props["Empty"] == {"type": "string", "title": "Empty"}

    def test_only_first_row_is_used(self) -> None:
        schema = build_fallback_schema([{"a": 1}, {"b": "x"}])
        assert list(schema["properties"]) == ["a"]

    def test_decimal_is_number(self) -> None:
        schema = build_fallback_schema([{"Price": Decimal("9.99")}])
        assert schema["properties"]["Price"]["type"] == "number"


class TestBuildUserPrompt:
    def test_sample_rendered_as_json(self) -> None:
        prompt = build_user_prompt([{"Name": "Ann", "Joined": date(2023, 5, 1)}])
        assert '"Name": "Ann"' in prompt
        assert '"Joined": "2023-05-01"' in prompt
        assert '"type": "object"' in prompt


class TestSchemaGenerator:
    async def test_empty_rows_skip_model(self) -> None:
        fake = FakeTextGenerator(reply="{}")
        generator = SchemaGenerator(fake)
        assert await generator.generate([]) == {"type": "object", "properties": {}}
        assert fake.calls == []

    async def test_model_schema_returned(self) -> None:
        model_schema = {"type": "object", "properties": {"x": {"type": "number", "title": "X"}}}
        fake = FakeTextGenerator(reply=f"```json\n{json.dumps(model_schema)}\n```")
        generator = SchemaGenerator(fake)
        assert await generator.generate([{"x": 1}]) == model_schema

    async def test_samples_at_most_five_rows(self) -> None:
        fake = FakeTextGenerator(reply='{"type": "object", "properties": {}}')
        generator = SchemaGenerator(fake, temperature=0.2, max_output_tokens=4000)
        rows = [{"n": i} for i in range(8)]
        await generator.generate(rows)
        call = fake.calls[0]
        assert call["system_prompt"] == SYSTEM_PROMPT
        assert call["temperature"] == 0.2
        assert call["max_output_tokens"] == 4000
        assert '"n": 4' in call["user_prompt"]
        assert '"n": 5' not in call["user_prompt"]

    async def test_unparseable_reply_falls_back(self) -> None:
        generator = SchemaGenerator(FakeTextGenerator(reply="I cannot help with that"))
        schema = await generator.generate([{"Age": 30}])
        assert schema == {"type": "object", "properties": {"Age": {"type": "number", "title": "Age"}}}

    async def test_non_object_reply_falls_back(self) -> None:
        generator = SchemaGenerator(FakeTextGenerator(reply="[1, 2, 3]"))
        schema = await generator.generate([{"Name": "Bob"}])
        assert schema["properties"] == {"Name": {"type": "string", "title": "Name"}}

    async def test_call_error_falls_back(self) -> None:
        fake = FakeTextGenerator(error=TextGenerationException("API error: 502", 502))
        schema = await SchemaGenerator(fake).generate([{"Name": "Bob"}])
        assert schema["properties"]["Name"] == {"type": "string", "title": "Name"}

    async def test_not_configured_falls_back(self) -> None:
        schema = await SchemaGenerator(None).generate([{"Qty": 2}])
        assert schema["properties"]["Qty"]["type"] == "number"


class TestInfer:
    async def test_success_result(self) -> None:
        result = await SchemaGenerator(FakeTextGenerator(reply='{"type": "object"}')).infer([{"a": 1}])
        assert result.ok
        assert result.schema == {"type": "object"}
        assert result.failure is None

    async def test_failure_reasons(self) -> None:
        not_configured = await SchemaGenerator(None).infer([{"a": 1}])
        assert not not_configured.ok
        assert "not configured" in not_configured.failure

        unparseable = await SchemaGenerator(FakeTextGenerator(reply="nope")).infer([{"a": 1}])
        assert "not parseable" in unparseable.failure

        not_object = await SchemaGenerator(FakeTextGenerator(reply='"text"')).infer([{"a": 1}])
        assert "not an object" in not_object.failure
