"""
plugins/elb - Elastic Load Balancing 도구

도구 목록:
    - Load Balancer 목록: ALB/NLB/GWLB 조회 (common.list_load_balancers)
    - ALB IP 이력: CloudTrail로 ALB Private IP 할당 이력 재구성 (ip_history)

CLI 사용법:
    elbcli list        → Load Balancer 목록
    elbcli history     → ALB IP 이력
"""
