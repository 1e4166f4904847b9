"""
Dashboard 앱은 자체 모델을 가지지 않습니다.
청구서 앱의 모델(Invoice, Customer, Revenue)을 apps.invoices.data 로 조회해 집계합니다.

주요 기능:
- 요약 카드 (결제 완료/대기 합계, 건수)
- 월별 매출 차트 (y축 라벨)
- 페이지네이션 / 금액 / 날짜 표시 형식
"""
