import pytest

from ci3lint.classify import Classification
from ci3lint.diagnostics import Severity
from ci3lint.document import Document
from ci3lint.lint import DirectQueryStyleRule, RuleEngine, SetModelRegistry, default_rules, run_rules
from ci3lint.store import DiagnosticStore
from ci3lint.text import Position
from tests._shared_cases import (
    ALL_PHP_CASES,
    BLOG_CONTROLLER_SOURCE,
    MULTI_LOAD_CONTROLLER_SOURCE,
    PhpCase,
    case_id,
)


@pytest.mark.parametrize("case", ALL_PHP_CASES, ids=case_id)
def test_engine_reports_expected_rules_per_case(case: PhpCase) -> None:
    diagnostics = RuleEngine().analyze(Document(identity=case.path, text=case.source))

    assert tuple(diagnostic.rule_id for diagnostic in diagnostics) == case.expected_rule_ids


def test_blog_controller_scenario() -> None:
    text = BLOG_CONTROLLER_SOURCE
    load_call = "$this->load->model('blog_model')"
    load_offset = text.index(load_call)

    diagnostics = RuleEngine().analyze(Document(identity="app/controllers/Blog.php", text=text))

    assert len(diagnostics) == 2
    inheritance, model_load = diagnostics
    assert inheritance.rule_id == "ControllerInheritanceRule"
    assert inheritance.severity == Severity.WARNING
    assert inheritance.message == "Controller should extend CI_Controller"
    assert inheritance.range == (Position(0, 6), Position(0, 16))
    assert model_load.rule_id == "ModelLoadExistenceRule"
    assert model_load.severity == Severity.WARNING
    assert model_load.message == "Model 'blog_model' might not exist"
    assert model_load.range == (Position(0, load_offset), Position(0, load_offset + len(load_call)))


def test_model_load_diagnostics_follow_document_order() -> None:
    diagnostics = RuleEngine().analyze(
        Document(identity="application/controllers/Shop.php", text=MULTI_LOAD_CONTROLLER_SOURCE)
    )

    starts = [diagnostic.start for diagnostic in diagnostics]
    assert starts == sorted(starts)
    assert [diagnostic.start.line for diagnostic in diagnostics] == [5, 6, 7]
    assert [diagnostic.start.column for diagnostic in diagnostics] == [8, 8, 8]


@pytest.mark.parametrize("line_break", ["\n", "\r\n", "\r"], ids=["lf", "crlf", "cr"])
def test_positions_ignore_line_ending_style(line_break: str) -> None:
    text = line_break.join(["<?php", "class Blog {", "    $this->load->model('blog_model');", "}"])

    diagnostics = RuleEngine().analyze(Document(identity="app/controllers/Blog.php", text=text))

    assert [diagnostic.range for diagnostic in diagnostics] == [
        (Position(1, 0), Position(1, 10)),
        (Position(2, 4), Position(2, 36)),
    ]


def test_direct_query_in_model_is_information() -> None:
    text = "<?php\nclass Q extends CI_Model { function f() { $this->db->query('SELECT 1'); } }"
    call = "$this->db->query('SELECT 1')"
    offset = text.index(call) - text.index("\n") - 1

    diagnostics = RuleEngine().analyze(Document(identity="application/models/Q.php", text=text))

    assert len(diagnostics) == 1
    assert diagnostics[0].rule_id == "DirectQueryStyleRule"
    assert diagnostics[0].severity == Severity.INFORMATION
    assert diagnostics[0].range == (Position(1, offset), Position(1, offset + len(call)))
    assert diagnostics[0].code == "CI3_DIRECT_QUERY"
    assert diagnostics[0].category == "style"


def test_dual_classified_document_runs_controller_then_model_rules() -> None:
    text = "<?php class X { function f() { $this->db->query('SELECT 1'); $this->load->model('m'); } }"

    diagnostics = RuleEngine().analyze(Document(identity="modules/models/controllers/X.php", text=text))

    assert [diagnostic.rule_id for diagnostic in diagnostics] == [
        "ControllerInheritanceRule",
        "ModelLoadExistenceRule",
        "ModelInheritanceRule",
        "DirectQueryStyleRule",
    ]


def test_controller_rules_do_not_flag_direct_queries() -> None:
    text = "<?php class C extends CI_Controller { function f() { $this->db->query('SELECT 1'); } }"

    assert RuleEngine().analyze(Document(identity="application/controllers/C.php", text=text)) == []


def test_analysis_is_idempotent_for_one_snapshot() -> None:
    engine = RuleEngine()
    document = Document(identity="application/controllers/Shop.php", text=MULTI_LOAD_CONTROLLER_SOURCE)

    assert engine.analyze(document) == engine.analyze(document)


def test_engine_replaces_store_entry_for_identity() -> None:
    store = DiagnosticStore("test")
    engine = RuleEngine(store=store)
    identity = "application/controllers/Blog.php"

    engine.analyze(Document(identity=identity, text=BLOG_CONTROLLER_SOURCE))
    assert len(store.get(identity)) == 2

    engine.analyze(Document(identity=identity, text="<?php class Blog extends CI_Controller {}"))
    assert store.get(identity) == ()
    assert identity in store


def test_engine_keeps_entries_of_other_documents() -> None:
    store = DiagnosticStore("test")
    engine = RuleEngine(store=store)

    first = engine.analyze(Document(identity="a/controllers/A.php", text=BLOG_CONTROLLER_SOURCE))
    engine.analyze(Document(identity="a/models/B.php", text="<?php class B {}"))

    assert list(store.get("a/controllers/A.php")) == first
    assert [d.rule_id for d in store.get("a/models/B.php")] == ["ModelInheritanceRule"]


def test_engine_accepts_custom_rule_sets() -> None:
    engine = RuleEngine(default_rules(SetModelRegistry(known_models=frozenset({"blog_model"}))))

    diagnostics = engine.analyze(Document(identity="app/controllers/Blog.php", text=BLOG_CONTROLLER_SOURCE))

    assert [d.rule_id for d in diagnostics] == ["ControllerInheritanceRule"]


def test_rules_for_classification() -> None:
    engine = RuleEngine()

    assert [rule.rule_id for rule in engine.rules_for(Classification.MODEL)] == [
        "ModelInheritanceRule",
        "DirectQueryStyleRule",
    ]
    assert engine.rules_for(Classification.UNCLASSIFIED) == ()


def test_engine_rejects_duplicate_rule_ids() -> None:
    with pytest.raises(ValueError, match="more than once"):
        RuleEngine((DirectQueryStyleRule(), DirectQueryStyleRule()))


def test_run_rules_runs_nothing_when_unclassified() -> None:
    assert run_rules(BLOG_CONTROLLER_SOURCE, Classification.UNCLASSIFIED, default_rules()) == []
