from frscript_linter import get_diagnostics
from frscript_linter.engine import LinterEngine
from frscript_linter.models import DiagnosticTag, LinterConfig, Severity
from frscript_linter.registry import RuleRegistry
from frscript_linter.rules.base import BaseRule, classify_mismatch

TYPE_CODES = {"type-mismatch", "implicit-cast"}


def codes(diagnostics, wanted=None):
    return [d.code for d in diagnostics if wanted is None or d.code in wanted]


def test_arity_mismatch():
    source = "int add(int a, int b) {\n    return a + b\n}\n\nvoid main() {\n    add(1)\n}"
    diagnostics = get_diagnostics(source)
    assert codes(diagnostics) == ["arity-mismatch"]
    assert diagnostics[0].line == 5
    assert diagnostics[0].severity == Severity.ERROR
    assert diagnostics[0].message == "Function 'add' expects 2 argument(s), but got 1"


NESTED_CALLS = """int square(int n) {
    return n * n
}

int add(int a, int b) {
    return a + b
}

void main() {
    print(%s)
}"""


def test_nested_call_argument_counts_once():
    assert get_diagnostics(NESTED_CALLS % "add(square(2), 3)") == []


def test_nested_call_arity_mismatch():
    (diagnostic,) = get_diagnostics(NESTED_CALLS % "add(square(2))")
    assert diagnostic.code == "arity-mismatch"
    assert diagnostic.message == "Function 'add' expects 2 argument(s), but got 1"
    assert (diagnostic.range.start, diagnostic.range.end) == (10, 24)


def test_nested_call_argument_type():
    (diagnostic,) = get_diagnostics(NESTED_CALLS % 'add(square("x"), 3)')
    assert diagnostic.code == "type-mismatch"
    assert diagnostic.message == "Type mismatch: expected 'int', but got 'str'"
    assert diagnostic.range.start == 21


def test_float_to_int_is_implicit_cast_warning():
    diagnostics = [d for d in get_diagnostics("int x = 3.5") if d.code in TYPE_CODES]
    assert len(diagnostics) == 1
    assert diagnostics[0].code == "implicit-cast"
    assert diagnostics[0].severity == Severity.WARNING
    assert diagnostics[0].message == "Implicit conversion from 'float' to 'int' (value will be truncated)"


def test_int_to_float_is_accepted():
    assert codes(get_diagnostics("float x = 3"), TYPE_CODES) == []


def test_any_is_never_flagged():
    assert codes(get_diagnostics('any v = "text"'), TYPE_CODES) == []


def test_assignment_type_mismatch():
    diagnostics = [d for d in get_diagnostics("str s = 5") if d.code in TYPE_CODES]
    assert codes(diagnostics) == ["type-mismatch"]
    assert diagnostics[0].severity == Severity.ERROR
    assert diagnostics[0].message == "Type mismatch: cannot assign 'int' to variable of type 'str'"


def test_struct_field_access_typing():
    source = """struct Point {
    float x
    float y
}

void main() {
    Point p = Point(1.0, 2.0)
    str label = p.x
    print(label)
}"""
    diagnostics = [d for d in get_diagnostics(source) if d.code in TYPE_CODES]
    assert len(diagnostics) == 1
    assert diagnostics[0].line == 7
    assert "cannot assign 'float' to variable of type 'str'" in diagnostics[0].message


def test_locals_shadow_globals():
    source = """str value = "global"

void main() {
    int value = 1
    int copy = value
    print(copy)
}"""
    assert codes(get_diagnostics(source), TYPE_CODES) == []


def test_parameters_are_visible_in_body():
    source = "void f(float ratio) {\n    int whole = ratio\n    print(whole)\n}\n\nvoid main() {\n    f(1.5)\n}"
    assert codes(get_diagnostics(source), TYPE_CODES) == ["implicit-cast"]


def test_missing_return():
    source = "int compute(int n) {\n    print(n)\n}"
    diagnostics = [d for d in get_diagnostics(source) if d.code == "missing-return"]
    assert len(diagnostics) == 1
    assert diagnostics[0].severity == Severity.WARNING
    assert diagnostics[0].message == "Function 'compute' with return type 'int' must return a value"
    assert diagnostics[0].range.start == 4


def test_return_type_mismatch():
    source = "str name() {\n    return 42\n}\n\nvoid main() {\n    print(name())\n}"
    diagnostics = [d for d in get_diagnostics(source) if d.code == "return-type-mismatch"]
    assert len(diagnostics) == 1
    assert diagnostics[0].line == 1
    assert diagnostics[0].message == "Return type mismatch in function 'name': expected 'str', but got 'int'"


def test_one_line_function_return():
    source = "int one() { return 1 }\n\nvoid main() {\n    print(one())\n}"
    assert get_diagnostics(source) == []


def test_unclosed_function_is_skipped():
    diagnostics = get_diagnostics("int broken() {\n    print(1)")
    assert "missing-return" not in codes(diagnostics)


def test_unused_function_hint():
    source = "void helper() {\n}\n\nvoid main() {\n}"
    diagnostics = get_diagnostics(source)
    assert codes(diagnostics) == ["unused-function"]
    assert diagnostics[0].severity == Severity.HINT
    assert diagnostics[0].tags == [DiagnosticTag.UNNECESSARY]
    assert diagnostics[0].message == "Function 'helper' is declared but never used"


def test_function_passed_by_name_is_used():
    source = "void helper() {\n}\n\nvoid main() {\n    run(helper)\n}"
    assert "unused-function" not in codes(get_diagnostics(source))


def test_decorated_function_is_used():
    source = "@route\nvoid helper() {\n}"
    assert "unused-function" not in codes(get_diagnostics(source))


def test_unused_variable_severity_is_configurable():
    (default,) = get_diagnostics("int x = 1")
    assert default.code == "unused-variable"
    assert default.severity == Severity.HINT

    config = LinterConfig(unused_variable_severity=Severity.WARNING)
    (configured,) = get_diagnostics("int x = 1", config)
    assert configured.severity == Severity.WARNING


def test_used_variable_is_not_reported():
    assert get_diagnostics("int x = 1\nprint(x)") == []


def test_semicolons():
    diagnostics = get_diagnostics("print(1);")
    assert codes(diagnostics) == ["no-semicolons"]
    assert diagnostics[0].range.start == 8
    assert diagnostics[0].auto_fixable


def test_semicolons_in_strings_and_comments_are_fine():
    assert get_diagnostics('print("a;b") // c; d') == []


def test_missing_return_type():
    diagnostics = get_diagnostics("helper() {\n}")
    assert codes(diagnostics) == ["missing-return-type"]
    assert diagnostics[0].message == "Missing return type for function. Did you mean 'void helper'?"


def test_control_flow_is_not_missing_return_type():
    assert get_diagnostics("while(running) {\n}") == []


def test_call_argument_types():
    source = """void greet(str name, int times) {
    print(name, times)
}

void main() {
    greet(5, 2)
    greet("a", 2.5)
}"""
    diagnostics = get_diagnostics(source)
    assert [(d.line, d.code, d.severity) for d in diagnostics] == [
        (5, "type-mismatch", Severity.ERROR),
        (6, "implicit-cast", Severity.WARNING),
    ]
    assert diagnostics[0].message == "Type mismatch: expected 'str', but got 'int'"


def test_int_argument_for_float_parameter():
    source = "void scale(float f) {\n    print(f)\n}\n\nvoid main() {\n    scale(2)\n}"
    assert get_diagnostics(source) == []


def test_struct_construction_arity():
    source = "struct Point {\n    float x\n    float y\n}\n\nPoint p = Point(1.0)\nprint(p)"
    diagnostics = get_diagnostics(source)
    assert codes(diagnostics) == ["arity-mismatch"]
    assert diagnostics[0].message == "Struct 'Point' expects 2 field(s), but got 1"


def test_variadic_function_skips_arity():
    source = 'void log(str msg, any *rest) {\n    print(msg, rest)\n}\n\nvoid main() {\n    log("a", 1, 2)\n}'
    assert get_diagnostics(source) == []


def test_ignore_and_select():
    assert get_diagnostics("int x = 1", LinterConfig(ignore=["unused-variable"])) == []

    config = LinterConfig(select=["implicit-cast"])
    assert codes(get_diagnostics("int x = 3.5", config)) == ["implicit-cast"]


def test_diagnostics_are_sorted():
    source = "int a = 1.5;\nstr b = 2"
    lines = [d.line for d in get_diagnostics(source)]
    assert lines == sorted(lines)


def test_failing_rule_does_not_stop_others():
    class BrokenRule(BaseRule):
        @property
        def rule_id(self):
            return "broken"

        @property
        def severity(self):
            return Severity.ERROR

        def check(self, context):
            raise RuntimeError("boom")

    registry = RuleRegistry()
    registry.register(BrokenRule())
    diagnostics = LinterEngine(registry=registry).validate("int x = 3.5")
    assert "implicit-cast" in codes(diagnostics)


def test_registered_rule_stays_in_its_registry():
    class ExtraRule(BaseRule):
        @property
        def rule_id(self):
            return "extra"

        @property
        def severity(self):
            return Severity.HINT

        def check(self, context):
            return []

    registry = RuleRegistry()
    registry.register(ExtraRule())
    assert "extra" in [r.rule_id for r in registry.get_enabled_rules()]
    assert "extra" not in [r.rule_id for r in RuleRegistry().get_enabled_rules()]
    assert "extra" not in [r.rule_id for r in LinterEngine().registry.get_enabled_rules()]


def test_metrics_diagnostics():
    source = "void check(int n) {\n    if n > 0 {\n        print(n)\n    }\n}\n\nvoid main() {\n    check(1)\n}"
    config = LinterConfig(max_complexity=1)
    (diagnostic,) = get_diagnostics(source, config)
    assert diagnostic.code == "high-complexity"
    assert diagnostic.severity == Severity.WARNING
    assert diagnostic.source == "frscript-metrics"

    config = LinterConfig(max_complexity=1, metrics_enabled=False)
    assert get_diagnostics(source, config) == []


def test_classify_mismatch():
    assert classify_mismatch("int", "float") == "implicit-cast"
    assert classify_mismatch("float", "int") is None
    assert classify_mismatch("string", "str") is None
    assert classify_mismatch("int", None) is None
    assert classify_mismatch("any", "str") is None
    assert classify_mismatch("str", "any") is None
    assert classify_mismatch("bool", "int") == "type-mismatch"
