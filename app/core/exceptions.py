# app/core/exceptions.py


class DashboardError(Exception):
    """대시보드 코어에서 발생하는 모든 예외의 기반 클래스"""

    message = "알 수 없는 오류가 발생했습니다."

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class LocationError(DashboardError):
    """위치 해석(지오코딩) 실패"""

    message = "위치 정보를 확인할 수 없습니다."


class OutOfBoundsError(LocationError):
    message = "대한민국 영역만 선택 가능합니다."

    def __init__(self, country_name: str = None):
        self.country_name = country_name
        super().__init__()


class NotFoundError(LocationError):
    message = "검색 결과가 없습니다."


class GeocodingError(LocationError):
    """지오코딩 API 통신 실패 / 응답 이상"""

    message = "도시명을 정확히 입력했는지 확인해주세요."


class FetchError(DashboardError):
    """4개 데이터 소스 중 하나라도 실패하면 발생"""

    message = "날씨 정보를 불러오지 못했습니다."

    def __init__(self, message: str = None, source: str = None):
        self.source = source
        super().__init__(message)
