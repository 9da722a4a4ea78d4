from app.services.prompt_service import TAILOR_PROMPT_TEMPLATE, build_prompt


def test_prompt_is_deterministic():
    first = build_prompt("Experience: built APIs", "Backend engineer")
    second = build_prompt("Experience: built APIs", "Backend engineer")
    assert first == second


def test_inputs_inserted_verbatim():
    resume = "Jane Doe\n{not a placeholder} 100% <b>bold</b>"
    job = "Senior Python Engineer\n- FastAPI\n- {braces}"

    prompt = build_prompt(resume, job)

    assert f"CURRENT RESUME:\n{resume}\n\nJOB DESCRIPTION:\n{job}\n" in prompt
    assert prompt.index(resume) < prompt.index(job)


def test_template_encodes_policy():
    assert "senior resume strategist" in TAILOR_PROMPT_TEMPLATE
    for heading in ("Summary", "Experience", "Education", "Skills"):
        assert f"  {heading}\n" in TAILOR_PROMPT_TEMPLATE
    assert "Use plain text only" in TAILOR_PROMPT_TEMPLATE
    assert "Do NOT invent employers, job titles, degrees, certifications, or dates." in TAILOR_PROMPT_TEMPLATE
    assert "4–6 highly targeted bullets" in TAILOR_PROMPT_TEMPLATE


def test_prompt_framing():
    prompt = build_prompt("r", "j")
    assert prompt.startswith("\nYou are a senior resume strategist")
    assert prompt.endswith("- The resume must read naturally and convincingly to a recruiter.\n\n")
