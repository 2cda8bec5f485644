"""Streamlit app for conservation donors, grants, field work and reporting."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, Iterable

import pandas as pd
import streamlit as st

from conservation_dashboard import (
    Criteria,
    ReportGenerator,
    ReportSuccess,
    Severity,
    UpdateMailer,
    ValidationError,
    Workspace,
    configure_logging,
    export_csv,
    export_records,
    write_export,
    format_currency,
    format_percent,
    load_settings,
    map_frame,
    site_points,
    survey_points,
)
from conservation_dashboard.models import (
    ActivityAction,
    ActivityCategory,
    ComplianceStatus,
    ComplianceType,
    DonorTier,
    DonorType,
    EngagementLevel,
    ExperienceLevel,
    GrantStatus,
    Priority,
    ProjectStatus,
    ReportStatus,
    ReportType,
    SurveyStatus,
    VolunteerStatus,
)
from conservation_dashboard.pipeline import ViewDefinition
from conservation_dashboard.views import ACTIVITY_VIEW


SETTINGS = load_settings()
configure_logging(SETTINGS.log_level)
logger = logging.getLogger(__name__)

SEVERITY_COLORS = {
    Severity.POSITIVE: "green",
    Severity.INFO: "blue",
    Severity.WARNING: "orange",
    Severity.CRITICAL: "red",
    Severity.NEUTRAL: "gray",
}


def _values(enum_type: Iterable[Any]) -> list[str]:
    return [member.value for member in enum_type]


def _inject_styles() -> None:
    st.markdown(
        """
        <style>
          :root {
            --cd-forest-700: #1f4d2b;
            --cd-forest-600: #2e7d32;
            --cd-moss-100: #f1f5ee;
            --cd-card: #ffffff;
            --cd-text: #1b1b1b;
            --cd-muted: #4a5148;
          }

          .stApp {
            background: linear-gradient(170deg, var(--cd-moss-100) 0%, #f7faf5 60%, #ffffff 100%);
            color: var(--cd-text);
          }

          .cd-hero {
            background: linear-gradient(124deg, var(--cd-forest-700), var(--cd-forest-600));
            border-radius: 18px;
            padding: 1.2rem 1.25rem;
            margin-bottom: 1rem;
            box-shadow: 0 16px 30px rgba(31, 77, 43, 0.25);
          }

          .cd-hero h1,
          .cd-hero p {
            color: #ffffff !important;
            margin: 0;
          }

          .cd-hero p {
            margin-top: 0.55rem;
            opacity: 0.93;
          }

          .metric-card {
            border-radius: 14px;
            border: 1px solid rgba(74, 81, 72, 0.2);
            background: var(--cd-card);
            box-shadow: 0 6px 14px rgba(24, 24, 24, 0.06);
            padding: 0.75rem 0.8rem;
            min-height: 108px;
          }

          .metric-label {
            margin: 0;
            color: var(--cd-muted);
            font-weight: 600;
            font-size: 0.84rem;
          }

          .metric-value {
            margin: 0.3rem 0 0;
            color: var(--cd-forest-700);
            font-size: 1.45rem;
            line-height: 1.1;
          }

          .metric-sub {
            margin: 0.4rem 0 0;
            color: #5a5a58;
            font-size: 0.82rem;
          }

          .section-note {
            color: #555453;
            margin-top: -0.2rem;
            margin-bottom: 0.8rem;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _render_metric_card(title: str, value: str, subtitle: str) -> None:
    st.markdown(
        f"""
        <div class="metric-card">
          <p class="metric-label">{title}</p>
          <p class="metric-value">{value}</p>
          <p class="metric-sub">{subtitle}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _hero() -> None:
    st.markdown(
        f"""
        <div class="cd-hero">
          <h1>{SETTINGS.organization_name} Conservation Dashboard</h1>
          <p>
            Donors, grants, field surveys, volunteers, compliance, projects and impact reporting
            in one workspace.
          </p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _section(title: str, note: str) -> None:
    st.markdown(f"### {title}")
    st.markdown(f"<p class='section-note'>{note}</p>", unsafe_allow_html=True)


def _badge(value: Any) -> str:
    color = SEVERITY_COLORS.get(value.severity, "gray")
    return f":{color}[{value.value}]"


def _table_or_info(frame: pd.DataFrame, empty_message: str) -> None:
    if frame.empty:
        st.info(empty_message)
        return
    st.dataframe(frame, use_container_width=True, hide_index=True)


def _split_list(text: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in text.split(",") if item.strip())


def _show_error(exc: ValueError) -> None:
    if isinstance(exc, ValidationError):
        for field_name, message in exc.errors.items():
            st.error(f"{field_name}: {message}")
        return
    st.error(str(exc))


def _workspace() -> Workspace:
    if "workspace" not in st.session_state:
        st.session_state.workspace = Workspace.from_samples()
        logger.info("Seeded a new workspace from sample data.")
    return st.session_state.workspace


def _report_generator() -> ReportGenerator:
    if "report_generator" not in st.session_state:
        st.session_state.report_generator = ReportGenerator.from_settings(SETTINGS, _workspace().activity)
    return st.session_state.report_generator


def _mailer() -> UpdateMailer:
    if "mailer" not in st.session_state:
        st.session_state.mailer = UpdateMailer.from_settings(SETTINGS, _workspace().activity)
    return st.session_state.mailer


def _filter_controls(
    key: str,
    view: ViewDefinition,
    status_options: list[str],
    type_options: list[str] | None = None,
    search_placeholder: str = "",
    status_label: str = "Status",
    type_label: str = "Type",
) -> tuple[Criteria, str | None]:
    columns = st.columns([2, 1, 1, 1], gap="small")
    with columns[0]:
        search_term = st.text_input("Search", key=f"{key}-search", placeholder=search_placeholder)
    with columns[1]:
        status = st.selectbox(status_label, ["All"] + status_options, key=f"{key}-status")
    with columns[2]:
        type_value = None
        if type_options is not None:
            type_value = st.selectbox(type_label, ["All"] + type_options, key=f"{key}-type")
    with columns[3]:
        sort_keys = list(view.sort_options)
        default_index = sort_keys.index(view.default_sort) if view.default_sort in sort_keys else 0
        sort_key = st.selectbox(
            "Sort By",
            options=sort_keys,
            index=default_index,
            format_func=lambda item: view.sort_options[item].label,
            key=f"{key}-sort",
        )
    return Criteria(status=status, type=type_value, search_term=search_term), sort_key


def _note_export(view: ViewDefinition, count: int, destination: str) -> None:
    _workspace().activity.record(
        ActivityAction.DATA_EXPORT,
        ActivityCategory.DATA_ACCESS,
        f"Exported {count} {view.name} records to {destination}",
    )


def _download_buttons(key: str, view: ViewDefinition, records: tuple) -> None:
    if not records:
        return
    json_name, json_text = export_records(view, records)
    csv_name, csv_data = export_csv(view, records)
    left, middle, right, _ = st.columns([1, 1, 1.4, 2], gap="small")
    with left:
        st.download_button(
            "Export JSON",
            data=json_text,
            file_name=json_name,
            mime="application/json",
            key=f"{key}-json-download",
            on_click=_note_export,
            args=(view, len(records), json_name),
        )
    with middle:
        st.download_button(
            "Download CSV",
            data=csv_data,
            file_name=csv_name,
            mime="text/csv",
            key=f"{key}-csv-download",
            on_click=_note_export,
            args=(view, len(records), csv_name),
        )
    with right:
        if st.button("Save to Export Folder", key=f"{key}-save-export"):
            try:
                json_path = write_export(SETTINGS.export_dir, json_name, json_text)
                csv_path = write_export(SETTINGS.export_dir, csv_name, csv_data)
            except OSError as exc:
                st.error(f"Could not write exports to {SETTINGS.export_dir}: {exc}")
                return
            _note_export(view, len(records), str(json_path.parent))
            st.success(f"Saved {json_path.name} and {csv_path.name} to {json_path.parent}.")


def _generate_report(job_key: str, label: str, coroutine_factory) -> None:
    """Run a report coroutine on click and keep the outcome for later reruns.

    A click only marks the job pending and reruns, so the button renders
    disabled while the next run does the work.
    """

    pending = st.session_state.setdefault("report_jobs_pending", set())
    state_key = f"report-result-{job_key}"
    if st.button(label, key=f"{job_key}-generate", disabled=job_key in pending):
        pending.add(job_key)
        st.rerun()

    if job_key in pending:
        try:
            with st.spinner("Generating report..."):
                result = asyncio.run(coroutine_factory(_report_generator()))
        finally:
            pending.discard(job_key)
        st.session_state[state_key] = result
        if isinstance(result, ReportSuccess):
            result.document.save(SETTINGS.export_dir)
        st.rerun()

    result = st.session_state.get(state_key)
    if result is None:
        return
    if not isinstance(result, ReportSuccess):
        st.error(f"Report generation failed: {result.reason}")
        return

    document = result.document
    st.success(f"{document.filename} ready: {document.pages} pages, {document.size_mb} MB.")
    st.download_button(
        "Download Report",
        data=document.content,
        file_name=document.download_name,
        mime="application/json",
        key=f"{job_key}-report-download",
    )


def _delete_button(store, record_id: int, key: str) -> None:
    if st.button("Delete Record", key=f"{key}-delete-{record_id}"):
        if store.delete(record_id):
            st.success("Record deleted.")
            st.rerun()
        st.error("Record was already removed.")


def render_dashboard() -> None:
    workspace = _workspace()
    donor_stats = workspace.donors.aggregates()
    grant_stats = workspace.grants.aggregates()
    survey_stats = workspace.surveys.aggregates()
    volunteer_stats = workspace.volunteers.aggregates()
    compliance_stats = workspace.compliance.aggregates()
    project_stats = workspace.projects.aggregates()

    metric_columns = st.columns(6)
    with metric_columns[0]:
        _render_metric_card(
            "Total Donated",
            format_currency(donor_stats["total_donated"]),
            f"{donor_stats['major_donors']} major donors",
        )
    with metric_columns[1]:
        _render_metric_card(
            "Grant Funding",
            format_currency(grant_stats["total_grant_value"]),
            f"{grant_stats['active_grants']} active grants",
        )
    with metric_columns[2]:
        _render_metric_card(
            "Species Recorded",
            str(int(survey_stats["total_species"])),
            f"{survey_stats['completed_surveys']} completed surveys",
        )
    with metric_columns[3]:
        _render_metric_card(
            "Volunteer Hours",
            f"{volunteer_stats['total_hours']:,.0f}",
            f"{volunteer_stats['active_volunteers']} active volunteers",
        )
    with metric_columns[4]:
        _render_metric_card(
            "Compliance Risks",
            str(compliance_stats["at_risk"]),
            f"{compliance_stats['critical_items']} critical items",
        )
    with metric_columns[5]:
        _render_metric_card(
            "Projects",
            str(project_stats["active_projects"]),
            f"{format_percent(project_stats['average_progress'])} average progress",
        )

    left, right = st.columns([1.3, 1], gap="large")
    with left:
        st.markdown("#### Grant Funding Remaining")
        grants_df = pd.DataFrame(
            [{"Grant": grant.title, "Remaining": grant.remaining or 0} for grant in workspace.grants.records]
        )
        if grants_df.empty:
            st.info("No grants recorded yet.")
        else:
            st.bar_chart(grants_df.set_index("Grant")["Remaining"], color="#2E7D32")

    with right:
        st.markdown("#### Impact Assessments")
        impact_df = pd.DataFrame(
            [
                {
                    "Project": item.project,
                    "Period": item.period,
                    "Biodiversity": item.biodiversity_score,
                    "Species Protected": item.species_protected,
                    "Risk": item.risk_level.value,
                }
                for item in workspace.impact_assessments
            ]
        )
        _table_or_info(impact_df, "No impact assessments recorded.")

    st.markdown("#### Upcoming Deadlines")
    deadlines = [
        {"Due": grant.end_date, "Item": grant.title, "Area": "Grant", "Status": grant.status.value}
        for grant in workspace.grants.records
        if grant.end_date
    ] + [
        {"Due": item.due_date, "Item": item.title, "Area": "Compliance", "Status": item.status.value}
        for item in workspace.compliance.records
        if item.due_date
    ]
    deadlines.sort(key=lambda row: row["Due"])
    _table_or_info(pd.DataFrame(deadlines[:10]), "No upcoming deadlines.")

    st.markdown("#### Recent Activity")
    recent = workspace.recent_activity(5)
    if not recent:
        st.info("No activity recorded in this session yet.")
    for entry in recent:
        st.markdown(
            f"{_badge(entry.action)} **{entry.description}**  \n"
            f"<span class='section-note'>{entry.timestamp} by {entry.user}</span>",
            unsafe_allow_html=True,
        )


def render_donors_tab() -> None:
    _section("Donors", "Donor directory with giving totals, engagement and impact reports.")
    store = _workspace().donors
    view = store.domain.view

    criteria, sort_key = _filter_controls(
        "donors",
        view,
        _values(DonorTier),
        _values(DonorType),
        search_placeholder="Name, email, or location",
    )
    result = store.query(criteria, sort_key)

    stats = result.aggregates
    metric_columns = st.columns(4)
    with metric_columns[0]:
        st.metric("Donors", str(stats["total_donors"]))
    with metric_columns[1]:
        st.metric("Total Donated", format_currency(stats["total_donated"]))
    with metric_columns[2]:
        st.metric("Average Donation", format_currency(stats["average_donation"]))
    with metric_columns[3]:
        st.metric("Major Donors", str(stats["major_donors"]))

    donors_df = pd.DataFrame(
        [
            {
                "ID": donor.id,
                "Name": donor.name,
                "Type": donor.type.value,
                "Tier": donor.tier.value,
                "Engagement": donor.engagement.value,
                "Total Donated": format_currency(donor.total_donated),
                "Gifts": donor.donation_count,
                "Last Donation": donor.last_donation or "-",
                "Location": donor.location or "-",
            }
            for donor in result.records
        ]
    )
    _table_or_info(donors_df, "No donors match the current filters.")
    _download_buttons("donors", view, result.records)

    left, right = st.columns([1, 1.3], gap="large")
    with left:
        st.markdown("#### Add Donor")
        with st.form("donor-create-form", clear_on_submit=True):
            name = st.text_input("Name *")
            email = st.text_input("Email *")
            phone = st.text_input("Phone")
            donor_type = st.selectbox("Donor Type", _values(DonorType))
            tier = st.selectbox("Tier", _values(DonorTier), index=1)
            location = st.text_input("Location")
            total_donated = st.number_input("Total Donated", min_value=0.0, step=100.0)
            interests = st.text_input("Interests (comma separated)")
            submit = st.form_submit_button("Create Donor", use_container_width=True)
            if submit:
                try:
                    store.add(
                        name=name,
                        email=email,
                        phone=phone,
                        type=donor_type,
                        tier=tier,
                        location=location,
                        total_donated=total_donated,
                        interests=_split_list(interests),
                    )
                    st.success("Donor created.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

    with right:
        if not result.records:
            return
        donor_map = {donor.id: donor for donor in result.records}
        selected_id = st.selectbox(
            "Open Donor",
            options=list(donor_map),
            format_func=lambda donor_id: f"{donor_map[donor_id].name} (#{donor_id})",
        )
        donor = donor_map[selected_id]
        st.markdown(f"**{donor.name}** | Tier {_badge(donor.tier)} | Engagement {_badge(donor.engagement)}")
        st.caption(f"Contact: {donor.contact_person or '-'} | {donor.email} | {donor.phone or '-'}")
        if donor.interests:
            st.caption("Interests: " + ", ".join(donor.interests))
        if donor.notes:
            st.write(donor.notes)

        with st.form(f"donor-edit-{donor.id}"):
            tier = st.selectbox("Tier", _values(DonorTier), index=_values(DonorTier).index(donor.tier.value))
            engagement = st.selectbox(
                "Engagement",
                _values(EngagementLevel),
                index=_values(EngagementLevel).index(donor.engagement.value),
            )
            notes = st.text_area("Notes", value=donor.notes, height=80)
            if st.form_submit_button("Save Changes"):
                try:
                    store.update(donor.id, tier=tier, engagement=engagement, notes=notes)
                    st.success("Donor updated.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

        _generate_report(
            f"donor:{donor.id}",
            "Generate Impact Report",
            lambda generator: generator.generate_donor_report(donor),
        )
        if st.button("Send Update Email", key=f"donor-email-{donor.id}"):
            try:
                with st.spinner("Sending update..."):
                    message = asyncio.run(_mailer().send_update(donor))
                st.success(message)
            except ValueError as exc:
                _show_error(exc)
        _delete_button(store, donor.id, "donor")


def render_grants_tab() -> None:
    _section("Grants", "Grant portfolio with funding, milestones and compliance reporting.")
    store = _workspace().grants
    view = store.domain.view

    categories = sorted({grant.category for grant in store.records if grant.category})
    criteria, sort_key = _filter_controls(
        "grants",
        view,
        _values(GrantStatus),
        categories,
        search_placeholder="Title or funder",
    )
    result = store.query(criteria, sort_key)

    stats = result.aggregates
    metric_columns = st.columns(4)
    with metric_columns[0]:
        st.metric("Total Grant Value", format_currency(stats["total_grant_value"]))
    with metric_columns[1]:
        st.metric("Awarded", format_currency(stats["total_awarded"]))
    with metric_columns[2]:
        st.metric("Remaining", format_currency(stats["total_remaining"]))
    with metric_columns[3]:
        st.metric("Active Grants", str(stats["active_grants"]))

    grants_df = pd.DataFrame(
        [
            {
                "ID": grant.id,
                "Title": grant.title,
                "Funder": grant.funder,
                "Status": grant.status.value,
                "Amount": format_currency(grant.amount),
                "Awarded": format_currency(grant.awarded),
                "Remaining": format_currency(grant.remaining),
                "Progress": format_percent(grant.progress),
                "End Date": grant.end_date or "-",
                "Check": "Remaining mismatch" if grant.remaining_drift else "OK",
            }
            for grant in result.records
        ]
    )
    _table_or_info(grants_df, "No grants match the current filters.")
    _download_buttons("grants", view, result.records)

    left, right = st.columns([1, 1.3], gap="large")
    with left:
        st.markdown("#### Add Grant")
        with st.form("grant-create-form", clear_on_submit=True):
            title = st.text_input("Title *")
            funder = st.text_input("Funder *")
            amount = st.number_input("Amount", min_value=0.0, step=1000.0)
            awarded = st.number_input("Awarded", min_value=0.0, step=1000.0)
            status = st.selectbox("Status", _values(GrantStatus), index=3)
            category = st.text_input("Category")
            start_date = st.date_input("Start Date", value=date.today())
            end_date = st.date_input("End Date", value=date.today())
            if st.form_submit_button("Create Grant", use_container_width=True):
                try:
                    store.add(
                        title=title,
                        funder=funder,
                        amount=amount,
                        awarded=awarded,
                        status=status,
                        category=category,
                        start_date=start_date,
                        end_date=end_date,
                    )
                    st.success("Grant created.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

    with right:
        if not result.records:
            return
        grant_map = {grant.id: grant for grant in result.records}
        selected_id = st.selectbox(
            "Open Grant",
            options=list(grant_map),
            format_func=lambda grant_id: f"{grant_map[grant_id].title} (#{grant_id})",
        )
        grant = grant_map[selected_id]
        st.markdown(f"**{grant.title}** | {_badge(grant.status)}")
        days_left = grant.days_remaining()
        detail_cols = st.columns(3)
        with detail_cols[0]:
            st.metric("Utilization", format_percent(grant.utilization_percent))
        with detail_cols[1]:
            st.metric("Milestones Done", format_percent(grant.milestone_completion_percent))
        with detail_cols[2]:
            st.metric("Days Remaining", "-" if days_left is None else str(days_left))
        if grant.remaining_drift:
            st.warning(
                f"Stored remaining {format_currency(grant.remaining)} differs from amount minus awarded "
                f"({format_currency(grant.expected_remaining)})."
            )

        milestones_df = pd.DataFrame(
            [
                {
                    "Milestone": milestone.name,
                    "Date": milestone.date,
                    "Payment": format_currency(milestone.payment),
                    "Done": "Yes" if milestone.completed else "No",
                }
                for milestone in grant.milestones
            ]
        )
        _table_or_info(milestones_df, "No milestones for this grant.")
        requirements_df = pd.DataFrame(
            [
                {"Requirement": item.task, "Due": item.due, "Done": "Yes" if item.completed else "No"}
                for item in grant.requirements
            ]
        )
        _table_or_info(requirements_df, "No reporting requirements for this grant.")

        with st.form(f"grant-edit-{grant.id}"):
            awarded = st.number_input("Awarded", min_value=0.0, value=float(grant.awarded), step=1000.0)
            remaining = st.number_input(
                "Remaining",
                min_value=0.0,
                value=float(grant.remaining or 0),
                step=1000.0,
            )
            progress = st.slider("Progress", 0, 100, int(grant.progress))
            status = st.selectbox(
                "Status",
                _values(GrantStatus),
                index=_values(GrantStatus).index(grant.status.value),
            )
            if st.form_submit_button("Save Changes"):
                try:
                    store.update(
                        grant.id,
                        awarded=awarded,
                        remaining=remaining,
                        progress=progress,
                        status=status,
                    )
                    st.success("Grant updated.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

        _generate_report(
            f"grant:{grant.id}",
            "Generate Compliance Report",
            lambda generator: generator.generate_grant_report(grant),
        )
        _delete_button(store, grant.id, "grant")


def render_surveys_tab() -> None:
    _section("Field Surveys", "Field survey log with species counts, locations and biodiversity analysis.")
    store = _workspace().surveys
    view = store.domain.view

    criteria, sort_key = _filter_controls(
        "surveys",
        view,
        _values(SurveyStatus),
        search_placeholder="Survey, location, or observer",
    )
    result = store.query(criteria, sort_key)

    stats = result.aggregates
    metric_columns = st.columns(4)
    with metric_columns[0]:
        st.metric("Surveys", str(stats["total_surveys"]))
    with metric_columns[1]:
        st.metric("Completed", str(stats["completed_surveys"]))
    with metric_columns[2]:
        st.metric("Species Recorded", str(int(stats["total_species"])))
    with metric_columns[3]:
        st.metric("Images", str(int(stats["total_images"])))

    surveys_df = pd.DataFrame(
        [
            {
                "ID": survey.id,
                "Survey": survey.name,
                "Location": survey.location,
                "Date": survey.date or "-",
                "Status": survey.status.value,
                "Species": survey.species_count,
                "Observer": survey.observer or "-",
                "Weather": survey.weather or "-",
            }
            for survey in result.records
        ]
    )
    _table_or_info(surveys_df, "No surveys match the current filters.")
    _download_buttons("surveys", view, result.records)
    _generate_report(
        "surveys",
        "Generate Survey Analysis Report",
        lambda generator: generator.generate_survey_report(result.records),
    )

    left, right = st.columns([1, 1.3], gap="large")
    with left:
        st.markdown("#### Plan Survey")
        with st.form("survey-create-form", clear_on_submit=True):
            name = st.text_input("Survey Name *")
            location = st.text_input("Location *")
            survey_date = st.date_input("Date", value=date.today())
            observer = st.text_input("Observer")
            equipment = st.text_input("Equipment (comma separated)")
            add_coordinates = st.checkbox("Record coordinates")
            latitude = st.number_input("Latitude", min_value=-90.0, max_value=90.0, value=0.0)
            longitude = st.number_input("Longitude", min_value=-180.0, max_value=180.0, value=0.0)
            if st.form_submit_button("Create Survey", use_container_width=True):
                try:
                    store.add(
                        name=name,
                        location=location,
                        date=survey_date,
                        observer=observer,
                        equipment=_split_list(equipment),
                        coordinates={"lat": latitude, "lng": longitude} if add_coordinates else None,
                    )
                    st.success("Survey planned.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

    with right:
        if not result.records:
            return
        survey_map = {survey.id: survey for survey in result.records}
        selected_id = st.selectbox(
            "Open Survey",
            options=list(survey_map),
            format_func=lambda survey_id: f"{survey_map[survey_id].name} (#{survey_id})",
        )
        survey = survey_map[selected_id]
        st.markdown(f"**{survey.name}** | {_badge(survey.status)}")
        if survey.notes:
            st.write(survey.notes)
        if survey.equipment:
            st.caption("Equipment: " + ", ".join(survey.equipment))

        with st.form(f"survey-edit-{survey.id}"):
            status = st.selectbox(
                "Status",
                _values(SurveyStatus),
                index=_values(SurveyStatus).index(survey.status.value),
            )
            species_count = st.number_input("Species Count", min_value=0, value=int(survey.species_count), step=1)
            images = st.number_input("Images", min_value=0, value=int(survey.images), step=1)
            notes = st.text_area("Notes", value=survey.notes, height=80)
            if st.form_submit_button("Save Changes"):
                try:
                    store.update(
                        survey.id,
                        status=status,
                        species_count=int(species_count),
                        images=int(images),
                        notes=notes,
                    )
                    st.success("Survey updated.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

        _delete_button(store, survey.id, "survey")


def render_volunteers_tab() -> None:
    _section("Volunteers", "Volunteer roster, hours and field assignments.")
    workspace = _workspace()
    store = workspace.volunteers
    view = store.domain.view

    criteria, sort_key = _filter_controls(
        "volunteers",
        view,
        _values(VolunteerStatus),
        _values(ExperienceLevel),
        search_placeholder="Name, email, or skill",
    )
    result = store.query(criteria, sort_key)

    stats = result.aggregates
    metric_columns = st.columns(4)
    with metric_columns[0]:
        st.metric("Volunteers", str(stats["total_volunteers"]))
    with metric_columns[1]:
        st.metric("Active", str(stats["active_volunteers"]))
    with metric_columns[2]:
        st.metric("Hours Logged", f"{stats['total_hours']:,.0f}")
    with metric_columns[3]:
        st.metric("Pending", str(stats["pending_volunteers"]))

    volunteers_df = pd.DataFrame(
        [
            {
                "ID": volunteer.id,
                "Name": volunteer.name,
                "Status": volunteer.status.value,
                "Experience": volunteer.experience.value,
                "Hours": volunteer.hours_logged,
                "Skills": ", ".join(volunteer.skills) or "-",
                "Next Assignment": volunteer.next_assignment or "-",
                "Joined": volunteer.joined or "-",
            }
            for volunteer in result.records
        ]
    )
    _table_or_info(volunteers_df, "No volunteers match the current filters.")
    _download_buttons("volunteers", view, result.records)

    action_left, action_right = st.columns(2, gap="large")
    with action_left:
        _generate_report(
            "volunteers",
            "Generate Volunteer Impact Report",
            lambda generator: generator.generate_volunteer_report(result.records),
        )
    with action_right:
        if st.button("Email Active Volunteers", key="volunteers-email"):
            with st.spinner("Sending updates..."):
                sent = asyncio.run(_mailer().send_to_active_volunteers(store.records))
            st.success(f"Update email sent to {sent} active volunteers.")

    st.markdown("#### Assignments")
    assignments_df = pd.DataFrame(
        [
            {
                "Assignment": item.title,
                "Date": item.date or "-",
                "Time": item.time or "-",
                "Location": item.location,
                "Volunteers": ", ".join(item.volunteers) or "-",
                "Supervisor": item.supervisor or "-",
                "Status": item.status.value,
            }
            for item in workspace.assignments
        ]
    )
    _table_or_info(assignments_df, "No assignments scheduled.")

    left, right = st.columns([1, 1.3], gap="large")
    with left:
        st.markdown("#### Register Volunteer")
        with st.form("volunteer-create-form", clear_on_submit=True):
            name = st.text_input("Name *")
            email = st.text_input("Email *")
            phone = st.text_input("Phone")
            experience = st.selectbox("Experience", _values(ExperienceLevel))
            skills = st.text_input("Skills (comma separated)")
            availability = st.text_input("Availability (comma separated)")
            if st.form_submit_button("Register Volunteer", use_container_width=True):
                try:
                    store.add(
                        name=name,
                        email=email,
                        phone=phone,
                        experience=experience,
                        skills=_split_list(skills),
                        availability=_split_list(availability),
                    )
                    st.success("Volunteer registered.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

    with right:
        if not result.records:
            return
        volunteer_map = {volunteer.id: volunteer for volunteer in result.records}
        selected_id = st.selectbox(
            "Open Volunteer",
            options=list(volunteer_map),
            format_func=lambda volunteer_id: f"{volunteer_map[volunteer_id].name} (#{volunteer_id})",
        )
        volunteer = volunteer_map[selected_id]
        st.markdown(f"**{volunteer.name}** | {_badge(volunteer.status)}")
        if volunteer.training:
            st.caption("Training: " + ", ".join(volunteer.training))

        with st.form(f"volunteer-edit-{volunteer.id}"):
            status = st.selectbox(
                "Status",
                _values(VolunteerStatus),
                index=_values(VolunteerStatus).index(volunteer.status.value),
            )
            hours_logged = st.number_input(
                "Hours Logged",
                min_value=0.0,
                value=float(volunteer.hours_logged),
                step=1.0,
            )
            if st.form_submit_button("Save Changes"):
                try:
                    store.update(volunteer.id, status=status, hours_logged=hours_logged)
                    st.success("Volunteer updated.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

        _delete_button(store, volunteer.id, "volunteer")


def render_compliance_tab() -> None:
    _section("Compliance", "Permits, audits and regulatory requirements by priority and due date.")
    store = _workspace().compliance
    view = store.domain.view

    criteria, sort_key = _filter_controls(
        "compliance",
        view,
        _values(ComplianceStatus),
        _values(ComplianceType),
        search_placeholder="Title or reviewer",
    )
    result = store.query(criteria, sort_key)

    stats = result.aggregates
    metric_columns = st.columns(4)
    with metric_columns[0]:
        st.metric("Compliant", str(stats["compliant"]))
    with metric_columns[1]:
        st.metric("At Risk", str(stats["at_risk"]))
    with metric_columns[2]:
        st.metric("In Review", str(stats["in_review"]))
    with metric_columns[3]:
        st.metric("Critical", str(stats["critical_items"]))

    compliance_df = pd.DataFrame(
        [
            {
                "ID": item.id,
                "Title": item.title,
                "Type": item.type.value,
                "Status": item.status.value,
                "Priority": item.priority.value,
                "Due": item.due_date or "-",
                "Reviewer": item.reviewer or "-",
                "Complete": format_percent(item.completion_percent),
            }
            for item in result.records
        ]
    )
    _table_or_info(compliance_df, "No compliance items match the current filters.")
    _download_buttons("compliance", view, result.records)
    _generate_report(
        "compliance",
        "Generate Compliance Report",
        lambda generator: generator.generate({"items": list(result.records), **stats}, "compliance"),
    )

    left, right = st.columns([1, 1.3], gap="large")
    with left:
        st.markdown("#### Add Compliance Item")
        with st.form("compliance-create-form", clear_on_submit=True):
            title = st.text_input("Title *")
            item_type = st.selectbox("Type", _values(ComplianceType))
            priority = st.selectbox("Priority", _values(Priority), index=2)
            due_date = st.date_input("Due Date", value=date.today())
            reviewer = st.text_input("Reviewer")
            if st.form_submit_button("Create Item", use_container_width=True):
                try:
                    store.add(title=title, type=item_type, priority=priority, due_date=due_date, reviewer=reviewer)
                    st.success("Compliance item created.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

    with right:
        if not result.records:
            return
        item_map = {item.id: item for item in result.records}
        selected_id = st.selectbox(
            "Open Item",
            options=list(item_map),
            format_func=lambda item_id: f"{item_map[item_id].title} (#{item_id})",
        )
        item = item_map[selected_id]
        st.markdown(f"**{item.title}** | {_badge(item.status)} | Priority {_badge(item.priority)}")
        for requirement in item.requirements:
            st.markdown(f"- {requirement.item} ({requirement.date}): {_badge(requirement.status)}")
        if item.overdue_requirements:
            st.warning(f"{len(item.overdue_requirements)} requirement(s) overdue.")
        if item.documents:
            st.caption("Documents: " + ", ".join(item.documents))

        with st.form(f"compliance-edit-{item.id}"):
            status = st.selectbox(
                "Status",
                _values(ComplianceStatus),
                index=_values(ComplianceStatus).index(item.status.value),
            )
            priority = st.selectbox("Priority", _values(Priority), index=_values(Priority).index(item.priority.value))
            if st.form_submit_button("Save Changes"):
                try:
                    store.update(item.id, status=status, priority=priority, last_review=date.today())
                    st.success("Compliance item updated.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

        _delete_button(store, item.id, "compliance")


def render_mapping_tab() -> None:
    _section("Mapping", "Survey locations and conservation project sites.")
    workspace = _workspace()
    show_surveys, show_sites = st.columns(2)
    with show_surveys:
        include_surveys = st.checkbox("Survey locations", value=True)
    with show_sites:
        include_sites = st.checkbox("Project sites", value=True)

    points = []
    if include_surveys:
        points.extend(survey_points(workspace.surveys.records))
    if include_sites:
        points.extend(site_points(workspace.project_sites))
    frame = map_frame(points)

    if frame.empty:
        st.info("No locations to plot.")
        return
    st.map(frame, latitude="lat", longitude="lon")
    _table_or_info(
        frame.rename(columns={"lat": "Latitude", "lon": "Longitude", "name": "Name", "kind": "Kind", "status": "Status"}),
        "No locations to plot.",
    )


def render_projects_tab() -> None:
    _section("Projects", "Conservation projects with budget health, objectives and risks.")
    store = _workspace().projects
    view = store.domain.view

    criteria, sort_key = _filter_controls(
        "projects",
        view,
        _values(ProjectStatus),
        _values(Priority),
        search_placeholder="Project or location",
    )
    result = store.query(criteria, sort_key)

    stats = result.aggregates
    metric_columns = st.columns(4)
    with metric_columns[0]:
        st.metric("Active Projects", str(stats["active_projects"]))
    with metric_columns[1]:
        st.metric("Total Budget", format_currency(stats["total_budget"]))
    with metric_columns[2]:
        st.metric("Spent", format_currency(stats["total_spent"]))
    with metric_columns[3]:
        st.metric("Average Progress", format_percent(stats["average_progress"]))

    projects_df = pd.DataFrame(
        [
            {
                "ID": project.id,
                "Project": project.name,
                "Status": project.status.value,
                "Priority": project.priority.value,
                "Progress": format_percent(project.progress),
                "Budget": format_currency(project.budget),
                "Budget Used": format_percent(project.budget_used_percent),
                "Manager": project.manager or "-",
            }
            for project in result.records
        ]
    )
    _table_or_info(projects_df, "No projects match the current filters.")
    _download_buttons("projects", view, result.records)

    left, right = st.columns([1, 1.3], gap="large")
    with left:
        st.markdown("#### Add Project")
        with st.form("project-create-form", clear_on_submit=True):
            name = st.text_input("Project Name *")
            location = st.text_input("Location *")
            manager = st.text_input("Manager")
            priority = st.selectbox("Priority", _values(Priority), index=2)
            budget = st.number_input("Budget", min_value=0.0, step=1000.0)
            start_date = st.date_input("Start Date", value=date.today())
            description = st.text_area("Description", height=80)
            if st.form_submit_button("Create Project", use_container_width=True):
                try:
                    store.add(
                        name=name,
                        location=location,
                        manager=manager,
                        priority=priority,
                        budget=budget,
                        start_date=start_date,
                        description=description,
                    )
                    st.success("Project created.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

    with right:
        if not result.records:
            return
        project_map = {project.id: project for project in result.records}
        selected_id = st.selectbox(
            "Open Project",
            options=list(project_map),
            format_func=lambda project_id: f"{project_map[project_id].name} (#{project_id})",
        )
        project = project_map[selected_id]
        health_color = SEVERITY_COLORS[project.budget_health]
        st.markdown(
            f"**{project.name}** | {_badge(project.status)} | "
            f"Budget used :{health_color}[{format_percent(project.budget_used_percent)}]"
        )
        st.progress(min(int(project.progress), 100))
        st.caption(f"{project.objectives_completed} of {len(project.objectives)} objectives complete")
        for objective in project.objectives:
            st.markdown(f"- {'[x]' if objective.completed else '[ ]'} {objective.text}")
        risks_df = pd.DataFrame(
            [
                {"Risk": risk.risk, "Probability": risk.probability.value, "Impact": risk.impact.value}
                for risk in project.risks
            ]
        )
        _table_or_info(risks_df, "No risks recorded for this project.")

        with st.form(f"project-edit-{project.id}"):
            progress = st.slider("Progress", 0, 100, int(project.progress))
            spent = st.number_input("Spent", min_value=0.0, value=float(project.spent), step=1000.0)
            status = st.selectbox(
                "Status",
                _values(ProjectStatus),
                index=_values(ProjectStatus).index(project.status.value),
            )
            if st.form_submit_button("Save Changes"):
                try:
                    store.update(project.id, progress=progress, spent=spent, status=status)
                    st.success("Project updated.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

        _delete_button(store, project.id, "project")


def render_reports_tab() -> None:
    _section("Reports", "Published reports, drafts in progress and on-demand platform summaries.")
    workspace = _workspace()
    store = workspace.reports
    view = store.domain.view

    criteria, sort_key = _filter_controls(
        "reports",
        view,
        _values(ReportStatus),
        _values(ReportType),
        search_placeholder="Title, author, or description",
    )
    result = store.query(criteria, sort_key)

    stats = result.aggregates
    metric_columns = st.columns(4)
    with metric_columns[0]:
        st.metric("Reports", str(stats["total_reports"]))
    with metric_columns[1]:
        st.metric("Published", str(stats["published_reports"]))
    with metric_columns[2]:
        st.metric("Downloads", str(int(stats["total_downloads"])))
    with metric_columns[3]:
        st.metric("Pending", str(stats["pending_reports"]))

    reports_df = pd.DataFrame(
        [
            {
                "ID": report.id,
                "Title": report.title,
                "Type": report.type.value,
                "Status": report.status.value,
                "Author": report.author or "-",
                "Period": report.period or "-",
                "Updated": report.last_updated or "-",
                "Downloads": report.downloads,
            }
            for report in result.records
        ]
    )
    _table_or_info(reports_df, "No reports match the current filters.")
    _download_buttons("reports", view, result.records)

    _generate_report(
        "general",
        "Generate Platform Report",
        lambda generator: generator.generate(
            {
                "donors": workspace.donors.aggregates(),
                "grants": workspace.grants.aggregates(),
                "surveys": workspace.surveys.aggregates(),
                "volunteers": workspace.volunteers.aggregates(),
                "compliance": workspace.compliance.aggregates(),
                "projects": workspace.projects.aggregates(),
            },
            "general",
        ),
    )

    left, right = st.columns([1, 1.3], gap="large")
    with left:
        st.markdown("#### Draft Report")
        with st.form("report-create-form", clear_on_submit=True):
            title = st.text_input("Title *")
            report_type = st.selectbox("Report Type", _values(ReportType))
            author = st.text_input("Author *")
            period = st.text_input("Period", placeholder="e.g. Q4 2024")
            description = st.text_area("Description", height=80)
            if st.form_submit_button("Create Draft", use_container_width=True):
                try:
                    store.add(title=title, type=report_type, author=author, period=period, description=description)
                    st.success("Draft report created.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

    with right:
        if not result.records:
            return
        report_map = {report.id: report for report in result.records}
        selected_id = st.selectbox(
            "Open Report",
            options=list(report_map),
            format_func=lambda report_id: f"{report_map[report_id].title} (#{report_id})",
        )
        report = report_map[selected_id]
        st.markdown(f"**{report.title}** | {_badge(report.status)}")
        if report.description:
            st.write(report.description)
        if report.metrics:
            st.dataframe(
                pd.DataFrame([{"Metric": key, "Value": value} for key, value in report.metrics.items()]),
                use_container_width=True,
                hide_index=True,
            )

        with st.form(f"report-edit-{report.id}"):
            status = st.selectbox(
                "Status",
                _values(ReportStatus),
                index=_values(ReportStatus).index(report.status.value),
            )
            if st.form_submit_button("Save Changes"):
                try:
                    store.update(report.id, status=status, last_updated=date.today())
                    st.success("Report updated.")
                    st.rerun()
                except ValueError as exc:
                    _show_error(exc)

        _delete_button(store, report.id, "report")


def render_activity_tab() -> None:
    _section("Activity Log", "Record changes, generated reports, exports and update emails from this session.")
    activity = _workspace().activity

    criteria, sort_key = _filter_controls(
        "activity",
        ACTIVITY_VIEW,
        _values(ActivityAction),
        _values(ActivityCategory),
        search_placeholder="Description, user, or action",
        status_label="Action",
        type_label="Category",
    )
    result = activity.query(criteria, sort_key)

    stats = result.aggregates
    metric_columns = st.columns(4)
    with metric_columns[0]:
        st.metric("Activities", str(stats["total_activities"]))
    with metric_columns[1]:
        st.metric("Records Changed", str(stats["records_changed"]))
    with metric_columns[2]:
        st.metric("Reports Generated", str(stats["reports_generated"]))
    with metric_columns[3]:
        st.metric("Failed Actions", str(stats["failed_actions"]))

    activity_df = pd.DataFrame(
        [
            {
                "Time": entry.timestamp,
                "User": entry.user,
                "Action": entry.action.value,
                "Category": entry.category.value,
                "Description": entry.description,
                "Success": "Yes" if entry.success else "No",
            }
            for entry in result.records
        ]
    )
    _table_or_info(activity_df, "No activity matches the current filters.")
    _download_buttons("activity", ACTIVITY_VIEW, result.records)


def main() -> None:
    st.set_page_config(
        page_title=f"{SETTINGS.organization_name} Conservation Dashboard",
        page_icon=":deciduous_tree:",
        layout="wide",
    )
    _inject_styles()
    _hero()

    tabs = st.tabs(
        [
            "Dashboard",
            "Donors",
            "Grants",
            "Surveys",
            "Volunteers",
            "Compliance",
            "Mapping",
            "Projects",
            "Reports",
            "Activity",
        ]
    )

    with tabs[0]:
        render_dashboard()
    with tabs[1]:
        render_donors_tab()
    with tabs[2]:
        render_grants_tab()
    with tabs[3]:
        render_surveys_tab()
    with tabs[4]:
        render_volunteers_tab()
    with tabs[5]:
        render_compliance_tab()
    with tabs[6]:
        render_mapping_tab()
    with tabs[7]:
        render_projects_tab()
    with tabs[8]:
        render_reports_tab()
    with tabs[9]:
        render_activity_tab()


if __name__ == "__main__":
    main()
