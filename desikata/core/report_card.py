import math
from dataclasses import dataclass, field
from fractions import Fraction
from numbers import Real
from typing import Any, List, Mapping, Optional

from desikata import config
from desikata.defaults import DEFAULT_GRADES


@dataclass(frozen=True)
class StudentReport:
    name: str
    total_marks: float
    percentage: float
    grade: str
    highest_subject: str
    lowest_subject: str
    passed_subjects: List[str] = field(default_factory=list)
    failed_subjects: List[str] = field(default_factory=list)
    subject_count: int = 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "totalMarks": self.total_marks,
            "percentage": self.percentage,
            "grade": self.grade,
            "highestSubject": self.highest_subject,
            "lowestSubject": self.lowest_subject,
            "passedSubjects": list(self.passed_subjects),
            "failedSubjects": list(self.failed_subjects),
            "subjectCount": self.subject_count,
        }


def is_valid_mark(mark: Any, max_mark) -> bool:
    if isinstance(mark, bool) or not isinstance(mark, Real):
        return False
    return 0 <= mark <= max_mark


def round_2(value) -> float:
    # Fraction(float) is exact, so this matches toFixed(2) style rounding
    return float(Fraction(math.floor(Fraction(value) * 100 + Fraction(1, 2)), 100))


def grade_for(percentage: float) -> str:
    bands = config.get("report_card.grades", DEFAULT_GRADES)

    for floor, grade in bands:
        if percentage >= floor:
            return grade

    return config.get("report_card.fail_grade", "F")


def generate_report_card(student: Any) -> Optional[StudentReport]:
    """
    Build a report card from { name: str, marks: {subject: mark} }.
    Returns None when the student, the name or any mark is invalid.
    """
    if not isinstance(student, Mapping):
        return None

    name = student.get("name")
    if not isinstance(name, str) or name == "":
        return None

    marks = student.get("marks")
    if not isinstance(marks, Mapping) or not marks:
        return None

    max_mark = config.get("report_card.max_mark", 100)
    if not all(is_valid_mark(m, max_mark) for m in marks.values()):
        return None

    pass_mark = config.get("report_card.pass_mark", 40)

    total = sum(marks.values())
    count = len(marks)
    percentage = round_2(total * 100 / (count * max_mark))

    # max()/min() keep the first subject on ties; all-0 or all-100 marks
    # still name a subject rather than ""
    highest = max(marks, key=lambda s: marks[s])
    lowest = min(marks, key=lambda s: marks[s])

    return StudentReport(
        name=name,
        total_marks=total,
        percentage=percentage,
        grade=grade_for(percentage),
        highest_subject=highest,
        lowest_subject=lowest,
        passed_subjects=[s for s, m in marks.items() if m >= pass_mark],
        failed_subjects=[s for s, m in marks.items() if m < pass_mark],
        subject_count=count,
    )
