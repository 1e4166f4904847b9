import openpyxl
from io import BytesIO
from decimal import Decimal


EXPORT_HEADERS = ['청구일', '고객명', '이메일', '금액 (USD)', '상태']


def export_invoices_to_excel(rows):
    """
    검색된 청구서를 엑셀로 내보내기

    rows: data.fetch_filtered_invoices() 와 같은 dict 목록 (amount 는 센트 정수)
    금액은 센트 → 달러로 변환하고 셀 서식으로 소수 2자리를 고정합니다.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "청구서_내보내기"

    ws.append(EXPORT_HEADERS)

    for row in rows:
        invoice_date = row['date'].strftime('%Y-%m-%d') if row.get('date') else ''
        # Decimal을 float으로 변환 (엑셀 호환)
        amount = float(Decimal(row['amount']) / Decimal(100))

        ws.append([
            invoice_date,
            row.get('name') or '',
            row.get('email') or '',
            amount,
            row.get('status') or '',
        ])
        ws.cell(row=ws.max_row, column=4).number_format = '#,##0.00'

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
