MESSAGES = {
    "app": {
        "name": "TaskHooks",
    },
    "hooks": {
        # Field labels
        "project": "Project",
        "commit": "Commit",
        "committer": "Committer",
        "branch": "Branch",
        "project_name": "Project name",
        "deployed_branch": "Deployed branch",
        "started_at": "Started at",
        "finished_at": "Finished at",
        "last_committer": "Last committer",
        "last_commit": "Last commit",
        "deployment_details": "Deployment details",
        "deployment_reason": "Deployment reason - {reason}",
        # Succeeded
        "task_success_email_subject": "Deployment Finished",
        "task_success_email_message": "The deployment was successful",
        "task_success_slack_message": ":white_check_mark: Deployment {task} successful!",
        "task_success_dingtalk_message": "Deployment {task} successful!",
        # Failed
        "task_failed_email_subject": "Deployment Failed",
        "task_failed_email_message": "The deployment has failed",
        "task_failed_slack_message": ":x: Deployment {task} failed!",
        "task_failed_dingtalk_message": "Deployment {task} failed!",
    },
}
