from component_analysis.binding import ABSENT
from component_analysis.config import AnalysisConfig
from component_analysis.context import DependencyContext
from component_analysis.rules import SOURCE_LABEL
from component_analysis.rules.crypto import CryptoAlgorithmsRule
from component_analysis.rules.license import ForbiddenLicenseRule
from component_analysis.rules.pending import PendingAnalysisRule
from component_analysis.rules.security import SecurityIssuesRule
from component_analysis.severity import Severity

FLASK = DependencyContext.from_strings("flask", "1.0", line=4, column=15)


def _run(rule, report):
    item = rule.consume(report)
    if item is ABSENT:
        return []
    return rule.produce(item)


def test_pending_rule_fires_for_empty_report():
    diagnostics = _run(PendingAnalysisRule(FLASK, AnalysisConfig()), {})

    assert len(diagnostics) == 1
    assert diagnostics[0].severity == Severity.INFORMATION
    assert "flask-1.0" in diagnostics[0].message
    assert "analysis is pending" in diagnostics[0].message
    assert diagnostics[0].source == SOURCE_LABEL


def test_pending_rule_fires_for_null_finished_at():
    diagnostics = _run(PendingAnalysisRule(FLASK, AnalysisConfig()), {"finished_at": None})

    assert len(diagnostics) == 1


def test_pending_rule_silent_once_finished():
    report = {"finished_at": "2017-01-01T00:00:00", "analyses": {}}

    assert _run(PendingAnalysisRule(FLASK, AnalysisConfig()), report) == []


def test_pending_rule_skips_missing_report():
    rule = PendingAnalysisRule(FLASK, AnalysisConfig())

    assert rule.consume(None) is ABSENT
    assert not rule.consumes(None)


def test_security_rule_lists_all_issues():
    report = {"analyses": {"security_issues": {"summary": ["CVE-1", "CVE-2"]}}}

    diagnostics = _run(SecurityIssuesRule(FLASK, AnalysisConfig()), report)

    assert len(diagnostics) == 1
    message = diagnostics[0].message
    assert diagnostics[0].severity == Severity.ERROR
    assert "flask-1.0 is vulnerable" in message
    assert "CVE-1" in message and "CVE-2" in message


def test_security_rule_empty_summary_produces_nothing():
    rule = SecurityIssuesRule(FLASK, AnalysisConfig())
    report = {"analyses": {"security_issues": {"summary": []}}}

    assert rule.consumes(report)
    assert _run(rule, report) == []


def test_security_rule_ignores_non_list_summary():
    report = {"analyses": {"security_issues": {"summary": "CVE-1"}}}

    assert _run(SecurityIssuesRule(FLASK, AnalysisConfig()), report) == []


def test_license_rule_reports_only_forbidden_licenses():
    config = AnalysisConfig(forbidden_licenses=("GPL-3.0",))
    report = {"analyses": {"source_licenses": {"summary": {"sure_licenses": ["GPL-3.0", "MIT"]}}}}

    diagnostics = _run(ForbiddenLicenseRule(FLASK, config), report)

    assert len(diagnostics) == 1
    assert "GPL-3.0" in diagnostics[0].message
    assert all("MIT" not in diagnostic.message for diagnostic in diagnostics)


def test_license_rule_follows_configured_order():
    config = AnalysisConfig(forbidden_licenses=("AGPL-3.0", "GPL-2.0", "GPL-3.0"))
    report = {"analyses": {"source_licenses": {"summary": {"sure_licenses": ["GPL-3.0", "AGPL-3.0"]}}}}

    diagnostics = _run(ForbiddenLicenseRule(FLASK, config), report)

    assert [d.message.split("\n-")[-1] for d in diagnostics] == ["AGPL-3.0", "GPL-3.0"]


def test_license_rule_without_forbidden_licenses_is_silent():
    report = {"analyses": {"source_licenses": {"summary": {"sure_licenses": ["GPL-3.0"]}}}}

    assert _run(ForbiddenLicenseRule(FLASK, AnalysisConfig()), report) == []


def test_crypto_rule_names_every_algorithm():
    report = {"analyses": {"crypto_algorithms": {"summary": {"content": [{"name": "MD5"}, {"name": "RC4"}]}}}}

    diagnostics = _run(CryptoAlgorithmsRule(FLASK, AnalysisConfig()), report)

    assert len(diagnostics) == 1
    assert diagnostics[0].severity == Severity.ERROR
    assert "MD5" in diagnostics[0].message
    assert "RC4" in diagnostics[0].message


def test_crypto_rule_skips_unnamed_entries():
    content = [{"count": 2}, "RC4", {"name": "SHA1"}]
    report = {"analyses": {"crypto_algorithms": {"summary": {"content": content}}}}

    diagnostics = _run(CryptoAlgorithmsRule(FLASK, AnalysisConfig()), report)

    assert len(diagnostics) == 1
    assert diagnostics[0].message.endswith("-SHA1")


def test_crypto_rule_silent_when_no_entry_has_a_name():
    report = {"analyses": {"crypto_algorithms": {"summary": {"content": [{}, 7]}}}}

    assert _run(CryptoAlgorithmsRule(FLASK, AnalysisConfig()), report) == []


def test_rules_use_version_range():
    report = {"analyses": {"security_issues": {"summary": ["CVE-1"]}}}

    diagnostic = _run(SecurityIssuesRule(FLASK, AnalysisConfig()), report)[0]

    assert diagnostic.range.start.line == 3
    assert diagnostic.range.start.character == 15
    assert diagnostic.range.end.character == 18


def test_present_null_binding_counts_as_absent():
    rule = SecurityIssuesRule(FLASK, AnalysisConfig())

    assert rule.consume({"analyses": {"security_issues": {"summary": None}}}) is ABSENT


def test_pending_rule_fires_for_non_mapping_report():
    rule = PendingAnalysisRule(FLASK, AnalysisConfig())

    assert len(_run(rule, [])) == 1
    assert len(_run(rule, "x")) == 1


def test_license_rule_ignores_non_list_sure_licenses():
    config = AnalysisConfig(forbidden_licenses=("GPL-3.0",))
    rule = ForbiddenLicenseRule(FLASK, config)
    report = {"analyses": {"source_licenses": {"summary": {"sure_licenses": "GPL-3.0"}}}}

    assert rule.consumes(report)
    assert _run(rule, report) == []


def test_license_rule_accepts_forbidden_set_from_settings():
    config = AnalysisConfig.from_mapping({"forbidden_licenses": {"GPL-3.0", "AGPL-3.0"}})
    report = {"analyses": {"source_licenses": {"summary": {"sure_licenses": ["GPL-3.0", "AGPL-3.0"]}}}}

    diagnostics = _run(ForbiddenLicenseRule(FLASK, config), report)

    assert [d.message.split("\n-")[-1] for d in diagnostics] == ["AGPL-3.0", "GPL-3.0"]


def test_crypto_rule_ignores_non_list_content():
    rule = CryptoAlgorithmsRule(FLASK, AnalysisConfig())
    report = {"analyses": {"crypto_algorithms": {"summary": {"content": {"name": "MD5"}}}}}

    assert rule.consumes(report)
    assert _run(rule, report) == []
