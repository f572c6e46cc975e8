import json

from papergen.prompts import SYSTEM_PROMPT, build_messages, build_user_prompt


def test_system_prompt_states_format_and_rules():
    assert "expert question paper generator" in SYSTEM_PROMPT
    assert "single, valid JSON object" in SYSTEM_PROMPT
    assert '"totalMarks"' in SYSTEM_PROMPT
    assert "q_num" in SYSTEM_PROMPT
    assert "(mcq, short, long, numerical)" in SYSTEM_PROMPT
    assert '"Hindi"' in SYSTEM_PROMPT


def test_user_prompt_embeds_pretty_blueprint(blueprint):
    prompt = build_user_prompt(blueprint)

    assert prompt.startswith("Generate a question paper using the following blueprint:\n")
    assert json.dumps(blueprint, indent=2) in prompt


def test_user_prompt_keeps_hindi_readable():
    prompt = build_user_prompt({"language": "Hindi", "topic": "प्रकाश"})

    assert "प्रकाश" in prompt


def test_messages_are_system_then_user(blueprint):
    messages = build_messages(blueprint)

    assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert messages[1] == {"role": "user", "content": build_user_prompt(blueprint)}
    assert len(messages) == 2
