import textwrap

import pytest


@pytest.fixture
def university_puml():
    return textwrap.dedent(
        """\
        @startuml
        ' university sample
        class Student {
          name : string
          studentNumber : int
          enrol(programme, year) : bool
        }

        entity StudyProgramme {
          title : string
        }

        Student "1" -- "0..*" StudyProgramme : enrolled
        Person <|-- Student
        constraint unique on Student : studentNumber
        constraint mandatory on StudyProgramme : title
        @enduml
        """
    )
