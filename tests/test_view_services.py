# /tests/test_view_services.py

from datetime import date

import pytest

from app.core.errors import AuthenticationError, NotFoundError, ValidationError
from app.services import (
    assessment_service,
    attendance_service,
    calendar_service,
    communication_service,
    dashboard_service,
    student_service,
    syllabus_service,
    teacher_service,
    workshop_service,
)
from app.services.view_helpers.fallback_policy import DAILY_ATTENDANCE_RANGE, PARTICIPANT_RANGE

from conftest import make_store

TODAY = date(2026, 10, 14)


# --- Teachers and login ---

@pytest.mark.asyncio
async def test_authenticate_accepts_known_id_and_rejects_others():
    store = make_store({"Authentication": [["ID", "Token"], ["T001", "x"]]})

    result = await teacher_service.authenticate(store, "T001")
    assert result["success"] is True
    assert result["token"].startswith("sample-token-")

    with pytest.raises(AuthenticationError):
        await teacher_service.authenticate(store, "T999")
    with pytest.raises(ValidationError):
        await teacher_service.authenticate(store, "")


@pytest.mark.asyncio
async def test_teacher_data_defaults_to_first_teacher():
    store = make_store({"Teachers": [
        ["ID", "Name", "Subject", "Class", "Department"],
        ["T001", "Anita", "Maths", "X-A"],
        ["T002", "Vikram", "Physics", "X-B", "Science"],
    ]})

    first = await teacher_service.get_teacher_data(store)
    assert first == {"id": "T001", "name": "Anita", "subject": "Maths", "class": "X-A", "department": "General"}
    assert (await teacher_service.get_teacher_data(store, "T002"))["department"] == "Science"
    with pytest.raises(NotFoundError):
        await teacher_service.get_teacher_data(store, "T404")


# --- Dashboard and students ---

@pytest.mark.asyncio
async def test_dashboard_summary_counts(students_rows, performance_rows, policy):
    store = make_store({
        "Students": students_rows,
        "Performance": performance_rows,
        "Workshops": [["ID"], ["w1", "Robotics", "2 days", "Completed"], ["w2", "Art", "1 day", "Scheduled"]],
    })

    data = await dashboard_service.get_summary_data(store, policy)

    assert data["totalStudents"] == 4
    assert (data["boys"], data["girls"]) == (2, 2)
    assert (data["brightLearners"], data["lateBoomers"]) == (2, 1)
    assert data["workshopsCompleted"] == 1
    assert {"category": "OBC", "count": 2} in data["categories"]
    assert sum(c["count"] for c in data["categories"]) <= data["totalStudents"]
    assert "pendingReports" in policy.synthetic_fields


@pytest.mark.asyncio
async def test_categories_breakdown_joins_performance_by_roll_number(students_rows, performance_rows):
    store = make_store({"Students": students_rows, "Performance": performance_rows})

    data = await dashboard_service.get_categories_data(store)

    obc = next(d for d in data["detailedCategories"] if d["name"] == "OBC")
    assert obc == {"name": "OBC", "total": 2, "boys": 1, "girls": 1, "brightLearners": 1, "lateBoomers": 0}
    assert [c["category"] for c in data["serviceCategories"]] == ["1", "2", "3", "4", "5"]


@pytest.mark.asyncio
async def test_performance_data_joins_roster(students_rows, performance_rows):
    """
    GIVEN: Student 101 Asha is a Bright Learner with two strengths and one weakness.
    WHEN:  The performance view is assembled.
    THEN:  She is listed with roster fields, and an unknown roll number reads as "Unknown".
    """
    store = make_store({"Students": students_rows, "Performance": performance_rows})

    data = await student_service.get_performance_data(store)

    asha = data["brightLearners"][0]
    assert asha["name"] == "Asha"
    assert asha["rollNo"] == "101"
    assert asha["strengths"] == ["Focus", "Speed"]
    assert asha["weaknesses"] == ["Grammar"]
    orphan = data["brightLearners"][1]
    assert orphan["name"] == "Unknown"
    assert [l["rollNo"] for l in data["lateBoomers"]] == ["102"]


@pytest.mark.asyncio
async def test_student_details_merges_every_sheet(students_rows, performance_rows):
    store = make_store({
        "Students": students_rows,
        "Performance": performance_rows,
        "Discipline": [["ID"], ["d1", "2026-09-01", "Ravi", "102", "Late to class"]],
        "Achievements": [["ID"], ["a1", "2026-08-01", "Ravi", "Chess Champion", "District"]],
    })

    details = await student_service.get_student_details(store, "102")

    assert details["class"] == "Active"
    assert details["performanceReport"] == "The student shows consistent effort in academics."
    assert details["weaknesses"] == ["Math", "Science"]
    assert details["disciplineRecords"] == [
        {"id": "d1", "date": "2026-09-01", "incident": "Late to class", "action": "Verbal Warning"}
    ]
    assert details["achievements"] == ["Chess Champion"]

    no_report = await student_service.get_student_details(store, "104")
    assert no_report["class"] == "X-A"
    assert no_report["strengths"] == []

    with pytest.raises(NotFoundError):
        await student_service.get_student_details(store, "000")


@pytest.mark.asyncio
async def test_discipline_data_renames_action():
    store = make_store({"Discipline": [["ID"], ["d1", "2026-09-01", "Ravi", "102", "Late", "Detention"]]})

    (entry,) = await student_service.get_discipline_data(store)

    assert entry["actionTaken"] == "Detention"


# --- Workshops ---

@pytest.mark.asyncio
async def test_workshop_sessions_and_participants(policy):
    store = make_store({
        "Workshops": [
            ["ID"],
            ["w1", "Robotics", "2 days", "Completed", "2026-09-01, 2026-09-02", "Intro"],
            ["w2", "Art", "1 day", "Scheduled", "2026-11-01", ""],
        ],
        "ServiceCourses": [["ID"], ["c1", "First Aid", "1 week", "Ongoing", "2026-10-01", ""]],
    })

    data = await workshop_service.get_workshops_data(store, policy)

    robotics, art = data["workshops"]
    assert robotics["sessions"] == [
        {"date": "2026-09-01", "topic": "Intro"},
        {"date": "2026-09-02", "topic": "General Discussion"},
    ]
    assert PARTICIPANT_RANGE[0] <= int(robotics["participants"]) <= PARTICIPANT_RANGE[1]
    assert art["participants"] == "0"
    assert data["serviceCourses"][0]["sessions"][0]["topic"] == "General Course Content"


# --- Attendance ---

@pytest.mark.asyncio
async def test_attendance_without_records_today(students_rows, policy):
    """
    GIVEN: Attendance rows exist, but none for today.
    WHEN:  The attendance view is assembled.
    THEN:  presentToday is 0 and every student's status comes from the fallback.
    """
    store = make_store({
        "Students": students_rows,
        "Attendance": [
            ["ID", "Date", "Student", "Status", "Remarks"],
            ["1", "2026-10-13", "101", "Present", ""],
            ["2", "2026-10-13", "102", "Absent", "Sick"],
            ["3", "2026-10-12", "101", "Present", ""],
        ],
    })

    data = await attendance_service.get_attendance_data(store, policy, today=TODAY)

    assert data["presentToday"] == 0
    assert data["totalStudents"] == 4
    assert all(s["status"] in ("Present", "Absent") for s in data["students"])
    assert data["weeklyAverage"] == 67
    trend = {point["date"]: point["percentage"] for point in data["attendanceTrend"]}
    assert trend["10/13"] == 50
    assert trend["10/12"] == 100
    assert DAILY_ATTENDANCE_RANGE[0] <= trend["10/14"] <= DAILY_ATTENDANCE_RANGE[1]

    asha, ravi, meera, _ = data["students"]
    assert (asha["totalPresent"], asha["totalDays"], asha["percentage"]) == (2, 2, 100)
    assert ravi["percentage"] == 0
    assert meera["percentage"] == 90
    assert data["belowThreshold"] == 1
    assert data["classComparison"][0] == {"class": "X-A", "percentage": 67}


@pytest.mark.asyncio
async def test_attendance_with_no_rows_in_window_uses_constant_weekly_average(students_rows, policy):
    store = make_store({"Students": students_rows, "Attendance": []})

    data = await attendance_service.get_attendance_data(store, policy, today=TODAY)

    assert data["weeklyAverage"] == 90
    assert len(data["attendanceTrend"]) == 7
    assert "weeklyAverage" in policy.synthetic_fields


# --- Assessments ---

@pytest.mark.asyncio
async def test_empty_assessments_use_fallbacks(policy):
    store = make_store({"Assessments": [], "Grades": []})

    data = await assessment_service.get_assessments_data(store, policy)

    assert data["nextAssessment"] == {"date": "Apr 15", "name": "Unit Test 3"}
    assert data["lastAssessmentAverage"] == 76
    assert data["pendingGrades"] == 0
    assert data["assessments"] == []
    assert [b["count"] for b in data["gradeDistribution"]] == [5, 12, 18, 8, 2]
    assert [t["assessment"] for t in data["performanceTrend"]] == [
        "Unit Test 1", "Mid Term", "Unit Test 2", "Assignment 3",
    ]


@pytest.mark.asyncio
async def test_assessment_averages_join_grades(policy):
    store = make_store({
        "Assessments": [
            ["ID", "Date", "Title", "Type", "Max", "Status"],
            ["a2", "2026-09-20", "Unit Test 2", "Test", "50", "Completed"],
            ["a1", "2026-09-01", "Unit Test 1", "Test", "50", "Completed"],
            ["a3", "2026-11-01", "Mid Term", "Exam", "100", "Scheduled"],
            ["a4", "2026-10-01", "Quiz", "Quiz", "10", "Completed"],
        ],
        "Grades": [
            ["Assessment", "Student", "Score", "Percentage", "Grade"],
            ["a1", "101", "40", "80", "B"],
            ["a1", "102", "45", "90%", "A"],
            ["a2", "101", "35", "70", "C"],
        ],
    })

    data = await assessment_service.get_assessments_data(store, policy)

    assert [a["id"] for a in data["assessments"]] == ["a1", "a2", "a4", "a3"]
    averages = {a["id"]: a["average"] for a in data["assessments"]}
    assert averages == {"a1": 85, "a2": 70, "a3": None, "a4": None}
    assert data["nextAssessment"] == {"date": "2026-11-01", "name": "Mid Term"}
    assert data["lastAssessmentAverage"] == 70
    assert data["pendingGrades"] == 1
    assert data["gradeDistribution"][0] == {"grade": "A", "count": 1}


@pytest.mark.asyncio
async def test_overflowing_grade_percentage_reads_as_zero(policy):
    store = make_store({
        "Assessments": [["ID"], ["a1", "2026-09-01", "Unit Test 1", "Test", "50", "Completed"]],
        "Grades": [["Assessment"], ["a1", "101", "40", "1e400", "B"]],
    })

    data = await assessment_service.get_assessments_data(store, policy)

    assert data["assessments"][0]["average"] == 0
    assert data["pendingGrades"] == 1
    assert data["lastAssessmentAverage"] == 76


# --- Syllabus ---

@pytest.mark.asyncio
async def test_syllabus_progress(policy):
    store = make_store({"Syllabus": [
        ["ID", "Unit", "Name", "Hours", "Spent", "Status", "Start", "Done", "Group"],
        ["t1", "Unit 1", "Sets", "4", "5", "Completed", "", "", "Theory"],
        ["t2", "Unit 1", "Relations", "6", "", "Pending", "2026-11-10", "", "Theory"],
        ["t3", "Unit 2", "Vectors", "10", "", "Pending", "2026-11-01", "", "Lab"],
        ["t4", "Unit 2", "Matrices", "3", "", "Pending", "", "", "Lab"],
    ]})

    data = await syllabus_service.get_syllabus_data(store, policy)

    assert data["completionPercentage"] == 25
    assert (data["completedUnits"], data["totalUnits"]) == (1, 2)
    assert data["unitCompletion"] == [{"unit": "Unit 1", "percentage": 50}, {"unit": "Unit 2", "percentage": 0}]
    theory, lab = data["timeAllocation"]
    assert theory == {"topic": "Theory", "planned": 10, "actual": 5}
    assert lab["planned"] == 13
    assert 10 <= lab["actual"] <= 15
    assert [t["id"] for t in data["upcomingTopics"]] == ["t3", "t2", "t4"]
    assert data["upcomingTopics"][2]["plannedStart"] == "Next Week"


@pytest.mark.asyncio
async def test_empty_syllabus_reads_as_zero_percent(policy):
    data = await syllabus_service.get_syllabus_data(make_store({}), policy)

    assert data["completionPercentage"] == 0
    assert data["timeAllocation"] == []
    assert data["upcomingTopics"] == []


# --- Calendar and communications ---

@pytest.mark.asyncio
async def test_calendar_upcoming_events_include_today_and_skip_the_past():
    store = make_store({"Events": [
        ["ID", "Date", "Title", "Type", "Time", "Description"],
        ["e1", "2026-10-20", "PTM", "Meeting", "10:00 AM", ""],
        ["e2", "2026-10-01", "Old", "Event", "", ""],
        ["e3", "2026-10-14", "Quiz", "Exam", "", ""],
    ]})

    data = await calendar_service.get_calendar_data(store, today=TODAY)

    assert [e["id"] for e in data["upcomingEvents"]] == ["e3", "e1"]
    assert data["upcomingEvents"][0]["time"] == "All Day"
    assert len(data["calendarData"]) == 5


@pytest.mark.asyncio
async def test_communications_counts_meetings_in_current_month(policy):
    store = make_store({
        "Communications": [
            ["ID"],
            ["c1", "2026-10-02", "Asha", "Mrs. Rao", "Meeting", "Progress", "Done"],
            ["c2", "2025-10-05", "Ravi", "Mr. Das", "Meeting", "Conduct", "Pending"],
            ["c3", "2026-10-07", "Ravi", "Mr. Das", "Call", "Fees", "Pending"],
        ],
        "Parents": [["ID"], ["p1", "Asha", "Mrs. Rao", "Mother", "999", "rao@example.com"]],
    })

    data = await communication_service.get_communications_data(store, policy, today=TODAY)

    assert data["parentMeetings"] == 1
    assert data["pendingResponses"] == 2
    assert data["nextPTM"] == {"date": "Apr 20", "time": "09:00 AM", "day": "Saturday"}
    assert data["parentDirectory"][0]["lastContact"] is None
