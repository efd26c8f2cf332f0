import json
from pathlib import Path

import pytest

from json_schema_to_ts import (
    CodeGeneratorConfig,
    InvalidRoot,
    PipelineGenerator,
    UnsupportedSchemaVariant,
)
from json_schema_to_ts.pipeline.analyzer import AliasDeclaration, StructureDeclaration
from json_schema_to_ts.pipeline.schema_ast import ArraySchema, ObjectSchema, StringSchema


def load_test_data():
    """Load test data from JSON file"""
    test_data_path = Path(__file__).parent / "test_data" / "generation_tests.json"
    with open(test_data_path) as f:
        return json.load(f)


USER_LIST = {
    "type": "array",
    "name": "UserList",
    "items": {
        "type": "object",
        "properties": [
            {"key": "id", "type": "string"},
            {"key": "name", "type": "string"},
        ],
    },
}


class TestGeneration:
    """Generated TypeScript for the data-driven cases"""

    @pytest.mark.parametrize("test_case", load_test_data(), ids=lambda tc: tc["name"])
    def test_generation(self, test_case):
        config = CodeGeneratorConfig.from_dict(test_case["config"])

        generated_code = PipelineGenerator(test_case["schema"], config).generate().full_text

        for expected in test_case["expected_contains"]:
            assert expected in generated_code, f"Expected '{expected}' to be in generated code for test '{test_case['name']}'"

        for not_expected in test_case["expected_not_contains"]:
            assert not_expected not in generated_code, f"Expected '{not_expected}' to NOT be in generated code for test '{test_case['name']}'"

    def test_user_list_full_text(self):
        result = PipelineGenerator(USER_LIST).generate()

        assert result.full_text == ("export type UserList = UserItem[];\n\nexport interface UserItem {\n    id: string;\n    name: string;\n}")

    def test_duplicates_rendered_once(self):
        case = next(tc for tc in load_test_data() if tc["name"] == "duplicates")

        generated_code = PipelineGenerator(case["schema"]).generate().full_text

        assert generated_code.count("interface Link ") == 1


class TestGenerateResult:
    """Individual declarations handed to consumers"""

    def test_individual_types_root_first(self):
        result = PipelineGenerator(USER_LIST).generate()

        assert [t.name for t in result.individual_types] == ["UserList", "UserItem"]
        assert isinstance(result.individual_types[0].declaration, AliasDeclaration)
        assert isinstance(result.individual_types[1].declaration, StructureDeclaration)
        assert result.individual_types[0].text == "export type UserList = UserItem[];"
        assert result.full_text == "\n\n".join(t.text for t in result.individual_types)

    def test_accepts_schema_nodes(self):
        schema = ArraySchema(name="UserList", items=ObjectSchema(properties=[StringSchema(key="id"), StringSchema(key="name")]))

        assert PipelineGenerator(schema).generate() == PipelineGenerator(USER_LIST).generate()

    def test_name_override(self):
        result = PipelineGenerator(USER_LIST, name="Customers").generate()

        assert [t.name for t in result.individual_types] == ["Customers", "Customer"]

    def test_name_override_does_not_touch_input(self):
        schema = ObjectSchema(name="User", properties=[])

        PipelineGenerator(schema, name="Account").generate()

        assert schema.name == "User"

    def test_generate_is_idempotent(self):
        generator = PipelineGenerator(USER_LIST)

        assert generator.generate() == generator.generate()

    def test_declarations(self):
        declarations = PipelineGenerator(USER_LIST).declarations()

        assert [d.name for d in declarations] == ["UserList", "UserItem"]


class TestGenerationErrors:
    def test_primitive_root(self):
        with pytest.raises(InvalidRoot):
            PipelineGenerator({"type": "string", "name": "Name"}).generate()

    def test_unknown_property_type(self):
        schema = {"type": "object", "name": "X", "properties": [{"key": "when", "type": "date"}]}

        with pytest.raises(UnsupportedSchemaVariant, match="date"):
            PipelineGenerator(schema).generate()
