import io
import pandas as pd
from draw_core.export import assignment_csv_bytes, assignment_to_df, render_pdf

def test_df_follows_roster_order():
    df = assignment_to_df({"Bob": "Zed", "Alice": "Ahri"}, ["Alice", "Bob", "Cara"])
    assert list(df["player"]) == ["Alice", "Bob"]
    assert list(df["champion"]) == ["Ahri", "Zed"]

def test_csv_contains_pairs():
    df = assignment_to_df({"Alice": "Ahri", "Bob": "Lux"})
    back = pd.read_csv(io.BytesIO(assignment_csv_bytes(df)))
    assert back.to_dict(orient="records") == [
        {"player": "Alice", "champion": "Ahri"},
        {"player": "Bob", "champion": "Lux"},
    ]

def test_pdf_bytes():
    df = assignment_to_df({"Alice": "Ahri"})
    pdf = render_pdf(df)
    assert pdf.startswith(b"%PDF")

def test_empty_assignment():
    df = assignment_to_df({})
    assert list(df.columns) == ["player", "champion"]
    assert df.empty
