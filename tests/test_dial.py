from __future__ import annotations

from gateway.dial import DialInstruction, build_dial_instruction, render_twiml
from gateway.routing import ToClient, ToNumber


def test_client_instruction_has_no_caller_id():
    instruction = build_dial_instruction(ToClient("alice"), "+1555", "+1999")
    assert instruction == DialInstruction(target_kind="client", target="alice", caller_id=None)


def test_number_instruction_presents_caller_id():
    instruction = build_dial_instruction(ToNumber("+1777"), "+1555", "+1999")
    assert instruction.target_kind == "number"
    assert instruction.target == "+1777"
    assert instruction.caller_id == "+1555"


def test_empty_number_uses_fallback():
    instruction = build_dial_instruction(ToNumber(""), "+1555", "+1999")
    assert instruction.target == "+1999"
    assert instruction.caller_id == "+1555"


def test_missing_number_and_fallback_dials_empty_string():
    instruction = build_dial_instruction(ToNumber(""), "+1555", "")
    assert instruction.target == ""


def test_render_client_dial():
    xml = render_twiml(DialInstruction(target_kind="client", target="bob"))
    assert "<Response><Dial><Client>bob</Client></Dial></Response>" in xml
    assert "callerId" not in xml


def test_render_number_dial():
    xml = render_twiml(DialInstruction(target_kind="number", target="+1999", caller_id="+1555"))
    assert '<Dial callerId="+1555">' in xml
    assert "<Number>+1999</Number>" in xml


def test_render_escapes_identity():
    xml = render_twiml(DialInstruction(target_kind="client", target="a<b>&c"))
    assert "<Client>a&lt;b&gt;&amp;c</Client>" in xml
