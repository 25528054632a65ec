"""
Domain Layer

설정 값 모델과 에러 체계
"""
