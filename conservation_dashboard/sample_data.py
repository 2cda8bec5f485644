"""Seed records the dashboard starts every session with."""

from __future__ import annotations

from .models import (
    ComplianceItem,
    Donor,
    Grant,
    ImpactAssessment,
    Project,
    ProjectSite,
    RecordModel,
    Report,
    Survey,
    Volunteer,
    VolunteerAssignment,
)


def donors() -> tuple[Donor, ...]:
    return (
        Donor(
            id=1,
            name="Green Earth Foundation",
            email="contact@greenearth.org",
            phone="+1 (555) 123-4567",
            type="Foundation",
            location="Seattle, WA",
            total_donated=125000,
            last_donation="2024-11-15",
            donation_count=8,
            tier="Major",
            engagement="High",
            interests=("Wildlife Protection", "Forest Conservation"),
            contact_person="Jennifer Martinez",
            notes="Particularly interested in wolf conservation programs",
        ),
        Donor(
            id=2,
            name="Ocean Conservation Society",
            email="info@oceancons.org",
            phone="+1 (555) 987-6543",
            type="Organization",
            location="San Francisco, CA",
            total_donated=75000,
            last_donation="2024-12-01",
            donation_count=12,
            tier="Major",
            engagement="High",
            interests=("Marine Biology", "Coastal Protection"),
            contact_person="Dr. Michael Chen",
            notes="Monthly recurring donor, very responsive to updates",
        ),
        Donor(
            id=3,
            name="Sarah & Robert Johnson",
            email="sarahjohnson@email.com",
            phone="+1 (555) 456-7890",
            type="Individual",
            location="Denver, CO",
            total_donated=15000,
            last_donation="2024-10-20",
            donation_count=24,
            tier="Regular",
            engagement="Medium",
            interests=("Bird Watching", "Habitat Restoration"),
            contact_person="Sarah Johnson",
            notes="Retired couple, donate annually in memory of their daughter",
        ),
        Donor(
            id=4,
            name="TechForGood Corporation",
            email="giving@techforgood.com",
            phone="+1 (555) 222-3333",
            type="Corporate",
            location="Austin, TX",
            total_donated=50000,
            last_donation="2024-09-15",
            donation_count=3,
            tier="Major",
            engagement="Low",
            interests=("Technology in Conservation", "Data Analytics"),
            contact_person="Amanda Foster",
            notes="CSR program, interested in tech-driven solutions",
        ),
    )


def grants() -> tuple[Grant, ...]:
    return (
        Grant(
            id=1,
            title="Amazon Conservation Initiative",
            funder="Global Environment Facility",
            amount=2500000,
            awarded=1800000,
            remaining=700000,
            status="Active",
            start_date="2024-01-15",
            end_date="2026-12-31",
            progress=72,
            category="Forest Conservation",
            requirements=(
                {"task": "Quarterly Progress Reports", "due": "2024-12-31", "completed": True},
                {"task": "Financial Audit", "due": "2025-03-15", "completed": False},
                {"task": "Environmental Impact Assessment", "due": "2025-06-30", "completed": False},
            ),
            milestones=(
                {"name": "Phase 1 Completion", "date": "2024-06-30", "completed": True, "payment": 600000},
                {"name": "Research Station Setup", "date": "2024-12-15", "completed": True, "payment": 450000},
                {"name": "Community Training Program", "date": "2025-06-30", "completed": False, "payment": 750000},
                {"name": "Final Evaluation", "date": "2026-11-30", "completed": False, "payment": 700000},
            ),
        ),
        Grant(
            id=2,
            title="Marine Biodiversity Protection",
            funder="Ocean Conservation Trust",
            amount=1200000,
            awarded=400000,
            remaining=800000,
            status="In Review",
            start_date="2024-07-01",
            end_date="2025-12-31",
            progress=33,
            category="Marine Conservation",
            requirements=(
                {"task": "Baseline Study Completion", "due": "2024-10-31", "completed": True},
                {"task": "Equipment Procurement Report", "due": "2024-12-31", "completed": False},
                {"task": "Partnership Agreements", "due": "2025-01-31", "completed": False},
            ),
            milestones=(
                {"name": "Baseline Research", "date": "2024-10-31", "completed": True, "payment": 400000},
                {"name": "Equipment Deployment", "date": "2025-03-31", "completed": False, "payment": 400000},
                {"name": "Data Collection Phase", "date": "2025-09-30", "completed": False, "payment": 400000},
            ),
        ),
        Grant(
            id=3,
            title="Wildlife Corridor Development",
            funder="National Science Foundation",
            amount=850000,
            awarded=850000,
            remaining=0,
            status="Completed",
            start_date="2023-03-01",
            end_date="2024-08-31",
            progress=100,
            category="Wildlife Protection",
            requirements=(
                {"task": "Final Report Submission", "due": "2024-09-30", "completed": True},
                {"task": "Financial Reconciliation", "due": "2024-10-15", "completed": True},
                {"task": "Impact Assessment", "due": "2024-11-30", "completed": True},
            ),
            milestones=(
                {"name": "Site Selection", "date": "2023-06-30", "completed": True, "payment": 200000},
                {"name": "Construction Phase", "date": "2024-03-31", "completed": True, "payment": 400000},
                {"name": "Monitoring Setup", "date": "2024-08-31", "completed": True, "payment": 250000},
            ),
        ),
    )


def surveys() -> tuple[Survey, ...]:
    return (
        Survey(
            id=1,
            name="Yellowstone Wildlife Survey - Winter 2024",
            location="Yellowstone National Park, WY",
            date="2024-12-10",
            status="completed",
            species_count=15,
            observer="Dr. Sarah Johnson",
            weather="Clear, -5°C",
            images=23,
            notes="Observed increased wolf pack activity near Lamar Valley",
            coordinates={"lat": 44.4280, "lng": -110.5885},
            duration="6 hours",
            equipment=("Binoculars", "Camera", "GPS tracker", "Field notebook"),
        ),
        Survey(
            id=2,
            name="Bird Migration Count - Fall",
            location="Point Pelee, Ontario",
            date="2024-12-08",
            status="in_progress",
            species_count=42,
            observer="Alex Rivera",
            weather="Partly cloudy, 8°C",
            images=67,
            notes="Peak migration period, high waterfowl activity",
            coordinates={"lat": 41.9583, "lng": -82.5169},
            duration="4 hours",
            equipment=("Spotting scope", "Camera", "Bird guide", "Counter"),
        ),
        Survey(
            id=3,
            name="Forest Biodiversity Assessment",
            location="Olympic National Park, WA",
            date="2024-12-05",
            status="planned",
            species_count=0,
            observer="Dr. Maria Santos",
            weather="Scheduled for clear day",
            images=0,
            notes="Comprehensive biodiversity survey of old-growth forest",
            coordinates={"lat": 47.8021, "lng": -123.6044},
            duration="8 hours",
            equipment=("Plant press", "Magnifying glass", "Camera", "Measuring tape"),
        ),
    )


def volunteers() -> tuple[Volunteer, ...]:
    return (
        Volunteer(
            id=1,
            name="Emma Thompson",
            email="emma.thompson@email.com",
            phone="+1-555-111-2222",
            skills=("Wildlife Photography", "GPS Navigation", "First Aid"),
            experience="Intermediate",
            status="active",
            hours_logged=45,
            next_assignment="2024-12-15",
            availability=("weekends", "mornings"),
            training=("Wildlife Safety", "Data Collection"),
            joined="2024-03-15",
        ),
        Volunteer(
            id=2,
            name="James Wilson",
            email="james.wilson@email.com",
            phone="+1-555-333-4444",
            skills=("Bird Identification", "Data Entry", "Public Speaking"),
            experience="Experienced",
            status="active",
            hours_logged=128,
            next_assignment="2024-12-18",
            availability=("weekdays", "flexible"),
            training=("Bird Banding", "Leadership Training"),
            joined="2023-08-20",
        ),
        Volunteer(
            id=3,
            name="Maria Rodriguez",
            email="maria.rodriguez@email.com",
            phone="+1-555-555-6666",
            skills=("Trail Maintenance", "Group Leadership", "Environmental Education"),
            experience="Expert",
            status="active",
            hours_logged=203,
            next_assignment="2024-12-20",
            availability=("weekends", "evenings"),
            training=("Wilderness First Aid", "Environmental Education Certification"),
            joined="2022-05-10",
        ),
        Volunteer(
            id=4,
            name="David Kim",
            email="david.kim@email.com",
            phone="+1-555-777-8888",
            skills=("Photography", "Social Media", "Data Analysis"),
            experience="Beginner",
            status="pending",
            hours_logged=0,
            next_assignment=None,
            availability=("weekends",),
            training=("Orientation Pending",),
            joined="2024-12-01",
        ),
    )


def volunteer_assignments() -> tuple[VolunteerAssignment, ...]:
    return (
        VolunteerAssignment(
            id=1,
            title="Wildlife Survey - Lamar Valley",
            date="2024-12-15",
            time="08:00 - 16:00",
            location="Lamar Valley, Yellowstone",
            volunteers=("Emma Thompson", "James Wilson"),
            supervisor="Dr. Sarah Johnson",
            type="Field Survey",
            status="confirmed",
        ),
        VolunteerAssignment(
            id=2,
            title="Bird Migration Count",
            date="2024-12-18",
            time="06:00 - 12:00",
            location="Hayden Valley Wetlands",
            volunteers=("James Wilson", "Maria Rodriguez"),
            supervisor="Alex Rivera",
            type="Research",
            status="confirmed",
        ),
        VolunteerAssignment(
            id=3,
            title="Community Education Event",
            date="2024-12-20",
            time="14:00 - 18:00",
            location="Visitor Center",
            volunteers=("Maria Rodriguez",),
            supervisor="Mike Chen",
            type="Education",
            status="needs_volunteers",
        ),
        VolunteerAssignment(
            id=4,
            title="Trail Maintenance - Tower Creek",
            date="2024-12-22",
            time="09:00 - 15:00",
            location="Tower Creek Trail",
            volunteers=(),
            supervisor="Field Team Alpha",
            type="Maintenance",
            status="open",
        ),
    )


def compliance_items() -> tuple[ComplianceItem, ...]:
    return (
        ComplianceItem(
            id=1,
            title="Environmental Impact Assessment - Amazon Project",
            type="Environmental Compliance",
            status="Compliant",
            due_date="2024-12-31",
            last_review="2024-11-15",
            reviewer="Dr. Sarah Mitchell",
            priority="High",
            requirements=(
                {"item": "Biodiversity Impact Study", "status": "Complete", "date": "2024-10-15"},
                {"item": "Soil Quality Assessment", "status": "Complete", "date": "2024-10-20"},
                {"item": "Water Quality Monitoring", "status": "In Progress", "date": "2024-12-01"},
                {"item": "Air Quality Analysis", "status": "Pending", "date": "2024-12-15"},
            ),
            documents=("EIA_Report_Final.pdf", "Biodiversity_Study.pdf", "Monitoring_Protocol.pdf"),
        ),
        ComplianceItem(
            id=2,
            title="Grant Compliance - Marine Conservation Fund",
            type="Financial Compliance",
            status="At Risk",
            due_date="2024-12-01",
            last_review="2024-11-10",
            reviewer="James Rodriguez",
            priority="Critical",
            requirements=(
                {"item": "Quarterly Financial Report", "status": "Overdue", "date": "2024-11-30"},
                {"item": "Expense Documentation", "status": "Complete", "date": "2024-11-15"},
                {"item": "Audit Trail Verification", "status": "In Progress", "date": "2024-12-01"},
                {"item": "Budget Variance Analysis", "status": "Pending", "date": "2024-12-05"},
            ),
            documents=("Financial_Report_Q3.pdf", "Expense_Records.xlsx", "Audit_Checklist.pdf"),
        ),
        ComplianceItem(
            id=3,
            title="Wildlife Protection Permit Renewal",
            type="Regulatory Compliance",
            status="Compliant",
            due_date="2025-03-15",
            last_review="2024-11-01",
            reviewer="Dr. Maria Santos",
            priority="Medium",
            requirements=(
                {"item": "Wildlife Handling Certification", "status": "Complete", "date": "2024-09-15"},
                {"item": "Site Safety Inspection", "status": "Complete", "date": "2024-10-01"},
                {"item": "Staff Training Records", "status": "Complete", "date": "2024-10-15"},
                {"item": "Equipment Calibration", "status": "Complete", "date": "2024-10-30"},
            ),
            documents=("Permit_Application.pdf", "Safety_Report.pdf", "Training_Certificates.pdf"),
        ),
        ComplianceItem(
            id=4,
            title="Carbon Offset Verification",
            type="Environmental Compliance",
            status="In Review",
            due_date="2025-01-15",
            last_review="2024-11-12",
            reviewer="Dr. Emily Chen",
            priority="High",
            requirements=(
                {"item": "Carbon Measurement Protocol", "status": "Complete", "date": "2024-10-15"},
                {"item": "Third-Party Verification", "status": "In Progress", "date": "2024-12-01"},
                {"item": "Monitoring System Setup", "status": "In Progress", "date": "2024-12-10"},
                {"item": "Baseline Data Collection", "status": "Complete", "date": "2024-11-01"},
            ),
            documents=("Carbon_Protocol.pdf", "Measurement_Data.xlsx", "Verification_Request.pdf"),
        ),
    )


def impact_assessments() -> tuple[ImpactAssessment, ...]:
    return (
        ImpactAssessment(
            id=1,
            project="Amazon Rainforest Restoration",
            period="Q3 2024",
            biodiversity_score=8.7,
            carbon_sequestration="2,450 tons CO2",
            habitat_restored="1,200 hectares",
            species_protected=156,
            community_benefit="High",
            economic_value="$1.2M",
            sustainability=92,
            risk_level="Low",
        ),
        ImpactAssessment(
            id=2,
            project="Coral Reef Monitoring",
            period="Q3 2024",
            biodiversity_score=7.3,
            carbon_sequestration="890 tons CO2",
            habitat_restored="45 hectares",
            species_protected=89,
            community_benefit="Medium",
            economic_value="$650K",
            sustainability=78,
            risk_level="Medium",
        ),
        ImpactAssessment(
            id=3,
            project="Wildlife Corridor Protection",
            period="Q3 2024",
            biodiversity_score=9.1,
            carbon_sequestration="1,780 tons CO2",
            habitat_restored="850 hectares",
            species_protected=203,
            community_benefit="High",
            economic_value="$980K",
            sustainability=96,
            risk_level="Low",
        ),
    )


def reports() -> tuple[Report, ...]:
    return (
        Report(
            id=1,
            title="Quarterly Wildlife Impact Assessment",
            type="Impact Report",
            status="published",
            created_date="2024-12-01",
            last_updated="2024-12-10",
            author="Dr. Sarah Johnson",
            period="Q4 2024",
            metrics={
                "species_monitored": 42,
                "surveys_completed": 156,
                "habitat_protected": 2400,
                "volunteers_engaged": 89,
            },
            stakeholders=("Board of Directors", "Major Donors", "Grant Agencies"),
            file_size="2.4 MB",
            downloads=23,
            description=(
                "Comprehensive assessment of conservation outcomes and biodiversity "
                "monitoring results for the fourth quarter."
            ),
        ),
        Report(
            id=2,
            title="Grant Compliance Report - Green Foundation",
            type="Compliance Report",
            status="draft",
            created_date="2024-11-28",
            last_updated="2024-12-08",
            author="Mike Chen",
            period="November 2024",
            metrics={
                "funds_utilized": 75000,
                "milestones_completed": 8,
                "deliverables_pending": 2,
                "budget_variance": -2.5,
            },
            stakeholders=("Green Foundation", "Finance Team"),
            file_size="1.8 MB",
            downloads=5,
            description=(
                "Monthly compliance report detailing fund utilization and project "
                "milestone achievements."
            ),
        ),
        Report(
            id=3,
            title="Volunteer Engagement Analytics",
            type="Analytics Report",
            status="in_review",
            created_date="2024-12-05",
            last_updated="2024-12-09",
            author="Alex Rivera",
            period="Full Year 2024",
            metrics={
                "total_volunteers": 234,
                "volunteer_hours": 5670,
                "retention_rate": 87.5,
                "satisfaction_score": 4.2,
            },
            stakeholders=("HR Team", "Program Managers", "Board"),
            file_size="3.1 MB",
            downloads=12,
            description=(
                "Analysis of volunteer participation, engagement levels, and program "
                "effectiveness throughout 2024."
            ),
        ),
        Report(
            id=4,
            title="Endangered Species Monitoring Summary",
            type="Scientific Report",
            status="scheduled",
            created_date="2024-12-08",
            last_updated="2024-12-10",
            author="Dr. Jennifer Martinez",
            period="December 2024",
            metrics={
                "endangered_species": 12,
                "population_trend": 8.3,
                "critical_habitats": 6,
                "conservation_actions": 18,
            },
            stakeholders=("Scientific Community", "Government Agencies", "Conservation Partners"),
            file_size="4.7 MB",
            downloads=0,
            description=(
                "Scientific analysis of endangered species population trends and "
                "conservation intervention effectiveness."
            ),
        ),
    )


def projects() -> tuple[Project, ...]:
    return (
        Project(
            id=1,
            name="Amazon Rainforest Restoration",
            status="Active",
            priority="High",
            progress=65,
            budget=250000,
            spent=162500,
            start_date="2024-03-15",
            end_date="2025-12-31",
            location="Amazon Basin, Brazil",
            manager="Dr. Maria Santos",
            team=("John Doe", "Sarah Wilson", "Carlos Rodriguez", "Emma Thompson"),
            description="Large-scale reforestation project to restore 1000 hectares of degraded rainforest",
            objectives=(
                {"id": 1, "text": "Plant 50,000 native trees", "completed": True},
                {"id": 2, "text": "Establish 3 research stations", "completed": True},
                {"id": 3, "text": "Train 20 local conservationists", "completed": False},
                {"id": 4, "text": "Create wildlife corridors", "completed": False},
            ),
            milestones=(
                {"id": 1, "name": "Site preparation", "date": "2024-03-15", "completed": True},
                {"id": 2, "name": "Initial planting phase", "date": "2024-06-01", "completed": True},
                {"id": 3, "name": "Research station setup", "date": "2024-09-15", "completed": True},
                {"id": 4, "name": "Community training program", "date": "2024-12-01", "completed": False},
                {"id": 5, "name": "Wildlife corridor completion", "date": "2025-06-01", "completed": False},
            ),
            risks=(
                {"id": 1, "risk": "Extreme weather events", "probability": "Medium", "impact": "High"},
                {"id": 2, "risk": "Funding shortfall", "probability": "Low", "impact": "High"},
                {"id": 3, "risk": "Local community resistance", "probability": "Low", "impact": "Medium"},
            ),
        ),
        Project(
            id=2,
            name="Coral Reef Monitoring System",
            status="Planning",
            priority="High",
            progress=25,
            budget=180000,
            spent=45000,
            start_date="2024-07-01",
            end_date="2025-12-31",
            location="Great Barrier Reef, Australia",
            manager="Dr. James Mitchell",
            team=("Alice Chen", "Bob Taylor", "Diana Kumar"),
            description=(
                "Deploy advanced monitoring technology to track coral reef health "
                "and restoration progress"
            ),
            objectives=(
                {"id": 1, "text": "Install 20 underwater sensors", "completed": False},
                {"id": 2, "text": "Develop monitoring dashboard", "completed": True},
                {"id": 3, "text": "Train marine biologists", "completed": False},
                {"id": 4, "text": "Establish data collection protocols", "completed": False},
            ),
            milestones=(
                {"id": 1, "name": "Equipment procurement", "date": "2024-07-01", "completed": True},
                {"id": 2, "name": "Sensor deployment", "date": "2024-10-01", "completed": False},
                {"id": 3, "name": "System testing", "date": "2024-12-01", "completed": False},
            ),
            risks=(
                {"id": 1, "risk": "Equipment failure underwater", "probability": "Medium", "impact": "Medium"},
                {"id": 2, "risk": "Technical complexity", "probability": "High", "impact": "Medium"},
            ),
        ),
        Project(
            id=3,
            name="Wildlife Corridor Protection",
            status="Completed",
            priority="Medium",
            progress=100,
            budget=120000,
            spent=115000,
            start_date="2023-01-15",
            end_date="2024-06-30",
            location="Serengeti, Tanzania",
            manager="Dr. Amara Johnson",
            team=("Peter Adams", "Lisa Wong", "Mike Hassan"),
            description="Establish protected corridors for wildlife migration between national parks",
            objectives=(
                {"id": 1, "text": "Map migration routes", "completed": True},
                {"id": 2, "text": "Secure land agreements", "completed": True},
                {"id": 3, "text": "Install protective barriers", "completed": True},
                {"id": 4, "text": "Monitor wildlife usage", "completed": True},
            ),
            milestones=(
                {"id": 1, "name": "Route mapping complete", "date": "2023-03-15", "completed": True},
                {"id": 2, "name": "Land agreements signed", "date": "2023-06-01", "completed": True},
                {"id": 3, "name": "Barrier installation", "date": "2023-12-01", "completed": True},
                {"id": 4, "name": "Monitoring system active", "date": "2024-03-01", "completed": True},
            ),
            risks=(),
        ),
    )


def project_sites() -> tuple[ProjectSite, ...]:
    return (
        ProjectSite(
            id=1,
            name="Amazon Rainforest Restoration Initiative",
            organization="WWF Brazil",
            location="Acre, Brazil",
            latitude=-9.0238,
            longitude=-70.8120,
            area_hectares=15600,
            budget=2800000,
            species_count=847,
        ),
        ProjectSite(
            id=2,
            name="Coral Reef Regeneration Project",
            organization="Great Barrier Reef Foundation",
            location="Queensland, Australia",
            latitude=-16.2839,
            longitude=145.7781,
            area_hectares=2340,
            budget=1900000,
            species_count=432,
        ),
        ProjectSite(
            id=3,
            name="African Elephant Conservation Program",
            organization="Save the Elephants",
            location="Samburu, Kenya",
            latitude=0.5667,
            longitude=37.5333,
            area_hectares=8900,
            budget=950000,
            species_count=156,
        ),
        ProjectSite(
            id=4,
            name="Urban Biodiversity Initiative",
            organization="NYC Parks Conservation",
            location="New York City, USA",
            latitude=40.7128,
            longitude=-74.0060,
            area_hectares=567,
            budget=780000,
            species_count=234,
        ),
        ProjectSite(
            id=5,
            name="Polar Bear Habitat Protection",
            organization="Polar Bears International",
            location="Svalbard, Norway",
            latitude=78.2232,
            longitude=15.6267,
            area_hectares=34500,
            budget=1200000,
            species_count=67,
        ),
    )


def seed_records() -> dict[str, tuple[RecordModel, ...]]:
    return {
        "donors": donors(),
        "grants": grants(),
        "surveys": surveys(),
        "volunteers": volunteers(),
        "compliance": compliance_items(),
        "reports": reports(),
        "projects": projects(),
    }
