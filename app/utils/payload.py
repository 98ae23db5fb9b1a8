# app/utils/payload.py


def dig(data, *keys):
    """
    중첩 JSON에서 keys 순서대로 값을 꺼낸다.
    중간 단계가 dict가 아니면 None
    예) dig(data, "response", "body", "items", "item")
    """
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def is_record_list(value) -> bool:
    """item 목록이 dict들의 list인지 (응답 형식 검증용)"""
    return isinstance(value, list) and all(isinstance(v, dict) for v in value)
