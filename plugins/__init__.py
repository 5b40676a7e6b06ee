"""
plugins - 서비스별 수집 도구
"""
