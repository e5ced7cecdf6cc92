from __future__ import annotations

from recipe_bridge.models.recipe import AvailableIngredient, RecipePreferences
from recipe_bridge.services.preferences import normalize_request
from recipe_bridge.services.prompt_compiler import CLOSING_INSTRUCTION, compile_prompt

EXPECTED_CLOSING = (
    "Create an amazing recipe that would be perfect for this request. "
    "Use whatever ingredients work best - if I mentioned having certain ingredients available, "
    "feel free to incorporate them if they fit well, but don't limit yourself to only those "
    "ingredients. Focus on making the best possible dish.\n\n"
    "Give the recipe a simple, appetizing name (2-3 words)."
)


def test_defaults_only_prompt_exact_text():
    prompt = compile_prompt(normalize_request({"userPrompt": "something quick for dinner"}))

    assert prompt == (
        "Create a delicious Indian Curry recipe.\n\n"
        "Request: something quick for dinner\n\n"
        + EXPECTED_CLOSING
    )


def test_closing_instruction_constant():
    assert CLOSING_INSTRUCTION == EXPECTED_CLOSING


def test_explicit_mild_has_no_spicing_clause():
    prompt = compile_prompt(RecipePreferences(spice_level="Mild", user_prompt="x"))

    assert prompt.startswith("Create a delicious Indian Curry recipe.\n")
    assert "spicing" not in prompt


def test_hot_spicing_clause_appears_once():
    prompt = compile_prompt(RecipePreferences(spice_level="Hot", user_prompt="x"))

    assert prompt.startswith("Create a delicious Indian Curry recipe with hot spicing.\n")
    assert prompt.count(" with hot spicing.") == 1


def test_spice_comparison_is_case_sensitive():
    prompt = compile_prompt(RecipePreferences(spice_level="mild", user_prompt="x"))
    assert " with mild spicing." in prompt


def test_requirements_line():
    prefs = normalize_request({"dietaryRestrictions": ["vegan", "gluten-free"], "userPrompt": "x"})
    assert "\nRequirements: vegan, gluten-free\n" in compile_prompt(prefs)


def test_ingredients_line_renders_quantities():
    prefs = RecipePreferences(
        available_ingredients=[
            AvailableIngredient(name="tomato", quantity="2"),
            AvailableIngredient(name="onion"),
        ],
        user_prompt="x",
    )
    prompt = compile_prompt(prefs)

    assert "\nIngredients I have available: tomato (2), onion\n" in prompt
    assert "onion ()" not in prompt


def test_full_composition_order():
    prefs = normalize_request(
        {
            "cuisine": "Mexican",
            "dishType": "Taco",
            "spiceLevel": "Extra Hot",
            "dietaryRestrictions": ["vegetarian"],
            "availableIngredients": [{"name": "beans", "quantity": "1 can"}],
            "userPrompt": "for a party",
        }
    )

    assert compile_prompt(prefs) == (
        "Create a delicious Mexican Taco recipe with extra hot spicing.\n\n"
        "Requirements: vegetarian\n\n"
        "Ingredients I have available: beans (1 can)\n\n"
        "Request: for a party\n\n"
        + EXPECTED_CLOSING
    )


def test_empty_prompt_still_has_request_line():
    prompt = compile_prompt(normalize_request({}))
    assert "\n\nRequest: \n\n" in prompt


def test_compilation_is_deterministic():
    prefs = normalize_request(
        {"spiceLevel": "Hot", "dietaryRestrictions": ["vegan"], "userPrompt": "dal"}
    )
    assert compile_prompt(prefs) == compile_prompt(prefs)
