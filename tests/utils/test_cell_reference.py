import pytest
from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from table_excel.utils.cell_reference import cell_coordinate, column_label, get_cell_value, header_text


@pytest.mark.parametrize('number, label', [
    (1, 'A'),
    (26, 'Z'),
    (27, 'AA'),
    (52, 'AZ'),
    (702, 'ZZ'),
    (703, 'AAA'),
])
def test_column_label(number, label):
    assert column_label(number) == label


def test_column_label_matches_openpyxl():
    for number in range(1, 2000):
        assert column_label(number) == get_column_letter(number)


def test_column_label_beyond_excel_limit():
    # openpyxl stops at 18278 ('ZZZ'); labels keep going
    assert column_label(18278) == 'ZZZ'
    assert column_label(18279) == 'AAAA'


def test_column_label_rejects_non_positive():
    with pytest.raises(ValueError):
        column_label(0)
    with pytest.raises(ValueError):
        column_label(-3)


def test_cell_coordinate():
    assert cell_coordinate(28, 5) == 'AB5'


def test_get_cell_value_reads_merge_owner():
    ws = Workbook().active
    ws['A1'] = 'Name'
    ws['B1'] = 'Info'
    ws['B2'] = 'Age'
    ws.merge_cells('A1:A2')

    assert get_cell_value(ws, 1, 1) == 'Name'
    assert get_cell_value(ws, 2, 1) == 'Name'
    assert get_cell_value(ws, 2, 2) == 'Age'
    assert get_cell_value(ws, 3, 3) is None


def test_header_text():
    assert header_text('Name') == 'Name'
    assert header_text(2024) == 2024
    assert header_text(None) is None
    assert header_text(('Contact', 'Email')) == "('Contact', 'Email')"
