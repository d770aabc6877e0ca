import json
import pandas as pd
from conftest import make_equipment, make_lab, make_sample, make_technician
from run import main


def test_bundled_batch_to_csv(tmp_path):
    out = tmp_path / "schedule.csv"
    assert main(["--out", str(out)]) == 0
    df = pd.read_csv(out)
    assert len(df) == 8
    assert df.loc[0, "sampleId"] == "S002"


def test_workbook_export(tmp_path):
    out = tmp_path / "schedule.xlsx"
    assert main(["--out", str(out)]) == 0
    sheets = pd.read_excel(out, sheet_name=None)
    assert set(sheets) == {"schedule", "utilisation", "unscheduled"}


def test_unmapped_type_fails_unless_lenient(tmp_path):
    path = tmp_path / "batch.json"
    lab = make_lab([make_sample(analysis_type="Tea Leaves"), make_sample("S002")], [make_technician()], [make_equipment()])
    path.write_text(json.dumps(lab), encoding="utf-8")

    assert main([str(path)]) == 1
    assert main([str(path), "--lenient"]) == 0


def test_missing_batch_fails(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1
