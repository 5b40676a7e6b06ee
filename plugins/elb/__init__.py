"""
plugins/elb - Elastic Load Balancing 수집 도구

Classic Load Balancer(CLB)와 등록된 EC2 인스턴스 정보를 수집합니다.

도구 목록:
    - instances: CLB별 등록 인스턴스 상세 수집 (JSON 출력)

CLI 사용법:
    elb-instances   → 환경변수에 지정된 CLB 수집
"""

CATEGORY = {
    "name": "elb",
    "display_name": "ELB",
    "description": "Classic Load Balancer 인스턴스 인벤토리",
    "aliases": ["clb", "lb"],
}
