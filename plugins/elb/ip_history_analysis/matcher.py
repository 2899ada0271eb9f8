"""
ALB ENI description 매처

ALB가 생성한 ENI의 description 형식:
    ELB app/<load-balancer-name>/<load-balancer-id>

이름 뒤의 "/"까지 포함해 검색하므로 "web-1"이 "web-10"의 ENI와
매칭되지 않습니다. 이름은 항상 정규식 이스케이프 후 사용합니다.
"""

from __future__ import annotations

import re

DESCRIPTION_PREFIX = "ELB app/"
DESCRIPTION_SEPARATOR = "/"


def build_description_pattern(load_balancer_name: str) -> re.Pattern[str]:
    """ALB 이름을 리터럴로 포함하는 description 패턴 생성"""
    return re.compile(
        re.escape(DESCRIPTION_PREFIX) + re.escape(load_balancer_name) + re.escape(DESCRIPTION_SEPARATOR)
    )


class NameMatcher:
    """ENI description이 특정 ALB 소유인지 판단"""

    def __init__(self, load_balancer_name: str):
        if not load_balancer_name:
            raise ValueError("load_balancer_name은 비어 있을 수 없습니다")
        self.load_balancer_name = load_balancer_name
        self.pattern = build_description_pattern(load_balancer_name)

    def matches(self, description: str) -> bool:
        """description 어디든 패턴이 포함되면 True (부분 검색)"""
        return self.pattern.search(description) is not None

    def __repr__(self) -> str:
        return f"NameMatcher({self.load_balancer_name!r})"
